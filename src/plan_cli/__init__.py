"""Command-line caller for the plan engine."""
