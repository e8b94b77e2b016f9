"""Exercise rule tables — candidate exercises keyed by level and goal.

Tables are plain module-level data built once at import. Adding an
exercise means adding an entry here; selection logic never changes.

Goal bias:
    FAT_LOSS      higher reps, short rest, cardio-leaning conditioning work.
    MUSCLE_GROWTH lower reps, heavier loads, long rest between sets.

``muscle_groups`` tags are lower-case muscle or joint names and are
matched against the user's injury labels.
"""

from __future__ import annotations

from plan_engine.models.enums import (
    ExerciseKind,
    ExperienceLevel,
    Goal,
    SessionFocus,
)
from plan_engine.models.exercise import ExerciseTemplate, WorkoutSplit

_S = ExerciseKind.STRENGTH
_C = ExerciseKind.CARDIO
_F = ExerciseKind.FLEXIBILITY

# ---------------------------------------------------------------------------
# Strength tables
# ---------------------------------------------------------------------------

STRENGTH_TABLE: dict[tuple[ExperienceLevel, Goal], tuple[ExerciseTemplate, ...]] = {
    # --- Fat loss: circuits, 12-15 reps, 45-60 s rest ---
    (ExperienceLevel.BEGINNER, Goal.FAT_LOSS): (
        ExerciseTemplate(
            name="Bodyweight Squats", kind=_S, sets=3, reps=15, rest_time_s=45,
            instructions=(
                "Stand with feet shoulder-width apart",
                "Lower down as if sitting in a chair",
                "Keep chest up and knees behind toes",
                "Return to starting position quickly",
            ),
            muscle_groups=("legs", "knee", "hip"),
            beginner_modification="Use a chair for support",
            advanced_modification="Add jump at the top",
        ),
        ExerciseTemplate(
            name="Modified Push-ups", kind=_S, sets=3, reps=12, rest_time_s=45,
            instructions=(
                "Start in plank position (knees down if needed)",
                "Lower chest to ground",
                "Push back up quickly",
            ),
            muscle_groups=("chest", "shoulder", "wrist"),
            beginner_modification="Do against a wall",
            advanced_modification="Full push-ups with faster tempo",
        ),
        ExerciseTemplate(
            name="Glute Bridges", kind=_S, sets=3, reps=15, rest_time_s=45,
            instructions=(
                "Lie on your back with knees bent",
                "Drive hips up by squeezing glutes",
                "Lower with control",
            ),
            muscle_groups=("glutes", "hip"),
            beginner_modification="Smaller range of motion",
            advanced_modification="Single-leg bridges",
        ),
        ExerciseTemplate(
            name="Dead Bug", kind=_S, sets=3, reps=12, rest_time_s=30,
            instructions=(
                "Lie on your back, arms up, knees at 90 degrees",
                "Extend opposite arm and leg while bracing the core",
                "Alternate sides",
            ),
            muscle_groups=("core",),
            beginner_modification="Move legs only",
            advanced_modification="Hold a light weight overhead",
        ),
        ExerciseTemplate(
            name="Jumping Jacks", kind=_S, sets=3, duration_s=40, rest_time_s=30,
            instructions=(
                "Jump feet out while raising arms overhead",
                "Jump back to the start and repeat at a steady rhythm",
            ),
            muscle_groups=("full body", "shoulder", "ankle"),
            beginner_modification="Step out instead of jumping",
            advanced_modification="Add a squat on every fourth rep",
        ),
        ExerciseTemplate(
            name="Band Pull-Aparts", kind=_S, sets=3, reps=15, rest_time_s=45,
            instructions=(
                "Hold a light band at shoulder height, arms straight",
                "Pull the band apart by squeezing the shoulder blades",
                "Return slowly",
            ),
            muscle_groups=("back", "shoulder"),
            beginner_modification="Use the lightest band",
            advanced_modification="Pause two seconds at full stretch",
        ),
        ExerciseTemplate(
            name="Step-ups", kind=_S, sets=3, reps=12, rest_time_s=45,
            instructions=(
                "Step onto a low, stable box with one foot",
                "Drive through the heel to stand tall",
                "Step down with control and alternate legs",
            ),
            muscle_groups=("legs", "knee", "hip"),
            beginner_modification="Use a lower step",
            advanced_modification="Hold dumbbells",
        ),
    ),
    (ExperienceLevel.INTERMEDIATE, Goal.FAT_LOSS): (
        ExerciseTemplate(
            name="Jump Squats", kind=_S, sets=4, reps=12, rest_time_s=60,
            instructions=(
                "Squat down with control",
                "Explode up into a jump",
                "Land softly and immediately squat again",
            ),
            muscle_groups=("legs", "knee", "ankle", "hip"),
            beginner_modification="Regular squats",
            advanced_modification="Add weight or increase reps",
        ),
        ExerciseTemplate(
            name="Burpees", kind=_S, sets=3, reps=8, rest_time_s=60,
            instructions=(
                "Squat down and place hands on floor",
                "Jump back to plank",
                "Do push-up",
                "Jump forward and up",
            ),
            muscle_groups=("full body", "shoulder", "wrist", "knee"),
            beginner_modification="Step back instead of jump",
            advanced_modification="Add tuck jump at the end",
        ),
        ExerciseTemplate(
            name="Kettlebell Swings", kind=_S, sets=4, reps=15, rest_time_s=60,
            instructions=(
                "Hinge at the hips with a flat back",
                "Snap hips forward to swing the bell to chest height",
                "Let the bell fall back between the legs",
            ),
            muscle_groups=("glutes", "hip", "lower back"),
            beginner_modification="Use a lighter kettlebell",
            advanced_modification="Single-arm swings",
        ),
        ExerciseTemplate(
            name="Mountain Climbers", kind=_S, sets=3, duration_s=40, rest_time_s=30,
            instructions=(
                "Start in plank",
                "Alternate bringing knees to chest",
                "Keep hips level",
            ),
            muscle_groups=("core", "shoulder", "wrist"),
            beginner_modification="Slow tempo",
            advanced_modification="Faster tempo",
        ),
        ExerciseTemplate(
            name="Push-ups", kind=_S, sets=3, reps=15, rest_time_s=45,
            instructions=(
                "Hands under shoulders, body in a straight line",
                "Lower chest to just above the floor",
                "Press up quickly",
            ),
            muscle_groups=("chest", "shoulder", "wrist"),
            beginner_modification="Hands on a bench",
            advanced_modification="Add a clap at the top",
        ),
        ExerciseTemplate(
            name="Bent-over Dumbbell Rows", kind=_S, sets=3, reps=15, rest_time_s=45,
            instructions=(
                "Hinge forward with a flat back",
                "Row both dumbbells to the ribs",
                "Lower under control",
            ),
            muscle_groups=("back", "elbow"),
            beginner_modification="Support one hand on a bench",
            advanced_modification="Pause at the top of each rep",
        ),
        ExerciseTemplate(
            name="Reverse Lunges", kind=_S, sets=3, reps=16, rest_time_s=45,
            instructions=(
                "Step one foot back and lower the back knee",
                "Push through the front heel to return",
                "Alternate legs",
            ),
            muscle_groups=("legs", "knee", "hip"),
            beginner_modification="Hold a wall for balance",
            advanced_modification="Hold dumbbells",
        ),
    ),
    (ExperienceLevel.ADVANCED, Goal.FAT_LOSS): (
        ExerciseTemplate(
            name="Weighted Jump Squats", kind=_S, sets=5, reps=10, rest_time_s=90,
            instructions=(
                "Hold dumbbells at shoulders",
                "Squat down with control",
                "Explode up into a jump",
                "Land softly",
            ),
            muscle_groups=("legs", "knee", "ankle", "hip"),
            beginner_modification="Use lighter weight",
            advanced_modification="Increase weight or add pause",
        ),
        ExerciseTemplate(
            name="Dumbbell Thrusters", kind=_S, sets=4, reps=12, rest_time_s=75,
            instructions=(
                "Front squat with dumbbells at shoulders",
                "Drive up and press the weights overhead in one motion",
                "Lower the weights as you descend into the next rep",
            ),
            muscle_groups=("legs", "shoulder", "knee"),
            beginner_modification="Squat and press separately",
            advanced_modification="Use a barbell",
        ),
        ExerciseTemplate(
            name="Renegade Rows", kind=_S, sets=4, reps=10, rest_time_s=60,
            instructions=(
                "Hold a plank on two dumbbells",
                "Row one dumbbell to the hip without rotating",
                "Alternate sides",
            ),
            muscle_groups=("back", "core", "shoulder", "wrist"),
            beginner_modification="Knees on the floor",
            advanced_modification="Add a push-up between rows",
        ),
        ExerciseTemplate(
            name="Walking Lunges", kind=_S, sets=4, reps=16, rest_time_s=60,
            instructions=(
                "Step forward and lower the back knee toward the floor",
                "Push through the front heel to step into the next lunge",
            ),
            muscle_groups=("legs", "knee", "hip"),
            beginner_modification="Stationary lunges",
            advanced_modification="Hold dumbbells",
        ),
        ExerciseTemplate(
            name="Burpee Pull-ups", kind=_S, sets=4, reps=8, rest_time_s=75,
            instructions=(
                "Perform a burpee under a pull-up bar",
                "Jump from the top into a pull-up",
                "Drop down and repeat",
            ),
            muscle_groups=("full body", "shoulder", "elbow", "knee"),
            beginner_modification="Replace the pull-up with a jump",
            advanced_modification="Add a tuck jump between reps",
        ),
        ExerciseTemplate(
            name="Clapping Push-ups", kind=_S, sets=4, reps=10, rest_time_s=60,
            instructions=(
                "Lower into a push-up",
                "Press explosively so the hands leave the floor",
                "Clap and land with soft elbows",
            ),
            muscle_groups=("chest", "shoulder", "wrist"),
            beginner_modification="Explosive push-ups without the clap",
            advanced_modification="Double clap",
        ),
        ExerciseTemplate(
            name="Heavy Kettlebell Swings", kind=_S, sets=5, reps=15, rest_time_s=60,
            instructions=(
                "Hinge and hike the bell back between the legs",
                "Snap the hips forward to float the bell to chest height",
            ),
            muscle_groups=("glutes", "hip", "lower back"),
            beginner_modification="Lighter bell",
            advanced_modification="Single-arm swings",
        ),
    ),
    # --- Muscle growth: 5-12 reps, heavier loads, 90-180 s rest ---
    (ExperienceLevel.BEGINNER, Goal.MUSCLE_GROWTH): (
        ExerciseTemplate(
            name="Bodyweight Squats", kind=_S, sets=3, reps=12, rest_time_s=90,
            instructions=(
                "Stand with feet shoulder-width apart",
                "Lower down slowly (3 seconds)",
                "Keep chest up and knees behind toes",
                "Return to starting position",
            ),
            muscle_groups=("legs", "knee", "hip"),
            beginner_modification="Use a chair for support",
            advanced_modification="Add weight or single leg",
        ),
        ExerciseTemplate(
            name="Push-ups", kind=_S, sets=3, reps=8, rest_time_s=90,
            instructions=(
                "Start in plank position",
                "Lower chest to ground slowly",
                "Push back up with control",
            ),
            muscle_groups=("chest", "shoulder", "wrist"),
            beginner_modification="Do on knees or against wall",
            advanced_modification="Elevate feet or add weight",
        ),
        ExerciseTemplate(
            name="Plank Hold", kind=_S, sets=3, duration_s=45, rest_time_s=90,
            instructions=(
                "Hold plank position",
                "Keep body straight",
                "Engage core and breathe steadily",
            ),
            muscle_groups=("core", "shoulder"),
            beginner_modification="On knees or shorter duration",
            advanced_modification="Add leg lifts or weight",
        ),
        ExerciseTemplate(
            name="Glute Bridges", kind=_S, sets=3, reps=12, rest_time_s=90,
            instructions=(
                "Lie on your back with knees bent",
                "Drive hips up and pause for two seconds",
                "Lower slowly",
            ),
            muscle_groups=("glutes", "hip"),
            beginner_modification="Smaller range of motion",
            advanced_modification="Single-leg bridges",
        ),
        ExerciseTemplate(
            name="Inverted Rows", kind=_S, sets=3, reps=8, rest_time_s=90,
            instructions=(
                "Hang under a sturdy table or low bar, body straight",
                "Pull the chest to the bar",
                "Lower slowly",
            ),
            muscle_groups=("back", "elbow"),
            beginner_modification="Bend the knees to shorten the lever",
            advanced_modification="Elevate the feet",
        ),
        ExerciseTemplate(
            name="Pike Push-ups", kind=_S, sets=3, reps=8, rest_time_s=90,
            instructions=(
                "Start in a downward-dog position",
                "Bend the elbows to lower the head toward the floor",
                "Press back up",
            ),
            muscle_groups=("shoulder", "wrist"),
            beginner_modification="Reduce the range of motion",
            advanced_modification="Elevate the feet on a bench",
        ),
        ExerciseTemplate(
            name="Superman Hold", kind=_S, sets=3, duration_s=30, rest_time_s=90,
            instructions=(
                "Lie face down with arms extended",
                "Lift arms, chest and legs off the floor and hold",
            ),
            muscle_groups=("lower back", "back"),
            beginner_modification="Lift arms only",
            advanced_modification="Hold light plates",
        ),
    ),
    (ExperienceLevel.INTERMEDIATE, Goal.MUSCLE_GROWTH): (
        ExerciseTemplate(
            name="Goblet Squats", kind=_S, sets=4, reps=10, rest_time_s=120,
            instructions=(
                "Hold weight at chest",
                "Squat down keeping chest up",
                "Drive through heels to stand",
                "Focus on muscle contraction",
            ),
            muscle_groups=("legs", "knee", "hip"),
            beginner_modification="Use lighter weight",
            advanced_modification="Add pause at bottom or heavier weight",
        ),
        ExerciseTemplate(
            name="Dumbbell Rows", kind=_S, sets=4, reps=10, rest_time_s=120,
            instructions=(
                "Hinge at hips",
                "Pull weight to ribs",
                "Squeeze the back at the top",
            ),
            muscle_groups=("back", "elbow"),
            beginner_modification="Use resistance band",
            advanced_modification="Single arm variation with pause",
        ),
        ExerciseTemplate(
            name="Dumbbell Bench Press", kind=_S, sets=4, reps=10, rest_time_s=120,
            instructions=(
                "Lie on a bench with dumbbells over the chest",
                "Lower until elbows are just below the bench",
                "Press up without locking out",
            ),
            muscle_groups=("chest", "shoulder", "elbow"),
            beginner_modification="Floor press",
            advanced_modification="Slow three-second lowering",
        ),
        ExerciseTemplate(
            name="Romanian Deadlifts", kind=_S, sets=4, reps=10, rest_time_s=120,
            instructions=(
                "Hold weights in front of the thighs",
                "Push hips back with a slight knee bend",
                "Return to standing by squeezing the glutes",
            ),
            muscle_groups=("hamstrings", "hip", "lower back"),
            beginner_modification="Reduce range of motion",
            advanced_modification="Single-leg variation",
        ),
        ExerciseTemplate(
            name="Dumbbell Shoulder Press", kind=_S, sets=4, reps=10, rest_time_s=120,
            instructions=(
                "Sit tall with dumbbells at shoulder height",
                "Press overhead without arching the back",
                "Lower slowly",
            ),
            muscle_groups=("shoulder", "elbow"),
            beginner_modification="Use lighter weight",
            advanced_modification="Stand and brace the core",
        ),
        ExerciseTemplate(
            name="Lat Pulldowns", kind=_S, sets=4, reps=10, rest_time_s=120,
            instructions=(
                "Grip the bar slightly wider than shoulders",
                "Pull the bar to the upper chest",
                "Control the return",
            ),
            muscle_groups=("back", "shoulder", "elbow"),
            beginner_modification="Use lighter weight",
            advanced_modification="Slow three-second lowering",
        ),
        ExerciseTemplate(
            name="Bulgarian Split Squats", kind=_S, sets=3, reps=10, rest_time_s=120,
            instructions=(
                "Rest the back foot on a bench",
                "Lower until the front thigh is parallel",
                "Drive up through the front heel",
            ),
            muscle_groups=("legs", "knee", "hip"),
            beginner_modification="Bodyweight only",
            advanced_modification="Hold heavier dumbbells",
        ),
    ),
    (ExperienceLevel.ADVANCED, Goal.MUSCLE_GROWTH): (
        ExerciseTemplate(
            name="Barbell Squats", kind=_S, sets=5, reps=6, rest_time_s=180,
            instructions=(
                "Position bar on upper back",
                "Squat down with control",
                "Drive through heels",
            ),
            muscle_groups=("legs", "knee", "hip", "lower back"),
            beginner_modification="Use lighter weight",
            advanced_modification="Add pause or tempo",
        ),
        ExerciseTemplate(
            name="Barbell Bench Press", kind=_S, sets=5, reps=6, rest_time_s=180,
            instructions=(
                "Grip the bar slightly wider than shoulders",
                "Lower to mid-chest",
                "Press to full extension",
            ),
            muscle_groups=("chest", "shoulder", "elbow"),
            beginner_modification="Use dumbbells",
            advanced_modification="Add a pause on the chest",
        ),
        ExerciseTemplate(
            name="Weighted Pull-ups", kind=_S, sets=4, reps=6, rest_time_s=150,
            instructions=(
                "Hang from the bar with a weight belt",
                "Pull until the chin clears the bar",
                "Lower fully between reps",
            ),
            muscle_groups=("back", "shoulder", "elbow"),
            beginner_modification="Band-assisted pull-ups",
            advanced_modification="Increase load",
        ),
        ExerciseTemplate(
            name="Conventional Deadlifts", kind=_S, sets=4, reps=5, rest_time_s=180,
            instructions=(
                "Bar over mid-foot, hinge and grip",
                "Brace and push the floor away",
                "Lock out with glutes, lower under control",
            ),
            muscle_groups=("lower back", "hip", "hamstrings"),
            beginner_modification="Trap-bar deadlift",
            advanced_modification="Deficit deadlift",
        ),
        ExerciseTemplate(
            name="Overhead Press", kind=_S, sets=4, reps=6, rest_time_s=150,
            instructions=(
                "Brace with the bar on the front of the shoulders",
                "Press straight overhead",
                "Lower to the collarbone",
            ),
            muscle_groups=("shoulder", "elbow", "lower back"),
            beginner_modification="Use dumbbells",
            advanced_modification="Add a pause at lockout",
        ),
        ExerciseTemplate(
            name="Barbell Rows", kind=_S, sets=4, reps=8, rest_time_s=150,
            instructions=(
                "Hinge to about 45 degrees with a flat back",
                "Row the bar to the lower ribs",
                "Lower under control",
            ),
            muscle_groups=("back", "lower back", "elbow"),
            beginner_modification="Chest-supported rows",
            advanced_modification="Pause rows",
        ),
        ExerciseTemplate(
            name="Weighted Dips", kind=_S, sets=4, reps=8, rest_time_s=150,
            instructions=(
                "Support yourself on parallel bars with a belt weight",
                "Lower until the upper arms are parallel",
                "Press back up",
            ),
            muscle_groups=("chest", "shoulder", "elbow"),
            beginner_modification="Bodyweight dips",
            advanced_modification="Add weight",
        ),
    ),
}

# ---------------------------------------------------------------------------
# Strength splits — rotated across the strength days of a week in day order.
# Names resolve against STRENGTH_TABLE for the user's level and goal.
# ---------------------------------------------------------------------------

_B = ExperienceLevel.BEGINNER
_I = ExperienceLevel.INTERMEDIATE
_A = ExperienceLevel.ADVANCED

STRENGTH_SPLITS: dict[Goal, tuple[WorkoutSplit, ...]] = {
    Goal.FAT_LOSS: (
        WorkoutSplit(
            name="HIIT Cardio",
            target_muscle_groups=("full body",),
            exercise_names={
                _B: ("Bodyweight Squats", "Jumping Jacks", "Dead Bug"),
                _I: ("Burpees", "Jump Squats", "Mountain Climbers"),
                _A: ("Burpee Pull-ups", "Dumbbell Thrusters", "Weighted Jump Squats"),
            },
        ),
        WorkoutSplit(
            name="Upper Body Strength",
            target_muscle_groups=("chest", "back", "shoulders", "arms"),
            exercise_names={
                _B: ("Modified Push-ups", "Band Pull-Aparts", "Dead Bug"),
                _I: ("Push-ups", "Bent-over Dumbbell Rows", "Mountain Climbers"),
                _A: ("Clapping Push-ups", "Renegade Rows", "Dumbbell Thrusters"),
            },
        ),
        WorkoutSplit(
            name="Lower Body Strength",
            target_muscle_groups=("legs", "glutes"),
            exercise_names={
                _B: ("Bodyweight Squats", "Glute Bridges", "Step-ups"),
                _I: ("Jump Squats", "Reverse Lunges", "Kettlebell Swings"),
                _A: ("Weighted Jump Squats", "Walking Lunges", "Heavy Kettlebell Swings"),
            },
        ),
        WorkoutSplit(
            name="Cardio Blast",
            target_muscle_groups=("cardiovascular",),
            exercise_names={
                _B: ("Jumping Jacks", "Step-ups", "Glute Bridges"),
                _I: ("Burpees", "Kettlebell Swings", "Mountain Climbers"),
                _A: ("Burpee Pull-ups", "Heavy Kettlebell Swings", "Walking Lunges"),
            },
        ),
    ),
    Goal.MUSCLE_GROWTH: (
        WorkoutSplit(
            name="Push Day",
            target_muscle_groups=("chest", "shoulders", "triceps"),
            exercise_names={
                _B: ("Push-ups", "Pike Push-ups", "Plank Hold"),
                _I: ("Dumbbell Bench Press", "Dumbbell Shoulder Press"),
                _A: ("Barbell Bench Press", "Overhead Press", "Weighted Dips"),
            },
        ),
        WorkoutSplit(
            name="Pull Day",
            target_muscle_groups=("back", "biceps"),
            exercise_names={
                _B: ("Inverted Rows", "Superman Hold"),
                _I: ("Dumbbell Rows", "Lat Pulldowns", "Romanian Deadlifts"),
                _A: ("Weighted Pull-ups", "Barbell Rows", "Conventional Deadlifts"),
            },
        ),
        WorkoutSplit(
            name="Leg Day",
            target_muscle_groups=("legs", "glutes"),
            exercise_names={
                _B: ("Bodyweight Squats", "Glute Bridges"),
                _I: ("Goblet Squats", "Bulgarian Split Squats", "Romanian Deadlifts"),
                _A: ("Barbell Squats", "Conventional Deadlifts"),
            },
        ),
        WorkoutSplit(
            name="Upper Body",
            target_muscle_groups=("chest", "back", "shoulders", "arms"),
            exercise_names={
                _B: ("Push-ups", "Inverted Rows", "Plank Hold"),
                _I: ("Dumbbell Bench Press", "Dumbbell Rows", "Dumbbell Shoulder Press"),
                _A: ("Barbell Bench Press", "Weighted Pull-ups", "Overhead Press"),
            },
        ),
    ),
}

# ---------------------------------------------------------------------------
# Cardio tables
# ---------------------------------------------------------------------------

CARDIO_TABLE: dict[tuple[ExperienceLevel, Goal], tuple[ExerciseTemplate, ...]] = {
    # --- Fat loss: longer sessions and intervals ---
    (ExperienceLevel.BEGINNER, Goal.FAT_LOSS): (
        ExerciseTemplate(
            name="Brisk Walking", kind=_C, duration_s=1800, rest_time_s=0,
            instructions=(
                "Maintain a pace where talking is slightly harder",
                "Swing arms naturally",
                "Keep good posture",
            ),
            muscle_groups=("knee", "ankle"),
            beginner_modification="Start with 15 minutes",
            advanced_modification="Add incline or hills",
        ),
        ExerciseTemplate(
            name="High Knees", kind=_C, sets=3, duration_s=30, rest_time_s=30,
            instructions=(
                "Run in place lifting knees high",
                "Keep core engaged",
                "Maintain quick tempo",
            ),
            muscle_groups=("knee", "hip", "ankle"),
            beginner_modification="March in place",
            advanced_modification="Increase speed and knee height",
        ),
        ExerciseTemplate(
            name="Step Jacks", kind=_C, sets=3, duration_s=45, rest_time_s=30,
            instructions=(
                "Step one foot out while raising the arms",
                "Return and switch sides",
            ),
            muscle_groups=("ankle", "shoulder"),
            beginner_modification="Arms to shoulder height only",
            advanced_modification="Full jumping jacks",
        ),
    ),
    (ExperienceLevel.INTERMEDIATE, Goal.FAT_LOSS): (
        ExerciseTemplate(
            name="Interval Jogging", kind=_C, duration_s=1500, rest_time_s=0,
            instructions=(
                "Alternate 3 minutes of jogging with 1 minute of walking",
                "Land on midfoot",
                "Keep arms relaxed",
            ),
            muscle_groups=("knee", "ankle"),
            beginner_modification="Walk/jog intervals",
            advanced_modification="Shorten the walking breaks",
        ),
        ExerciseTemplate(
            name="Jump Rope", kind=_C, sets=4, duration_s=60, rest_time_s=45,
            instructions=(
                "Stay on the balls of the feet",
                "Turn the rope from the wrists",
            ),
            muscle_groups=("ankle", "calf", "wrist"),
            beginner_modification="Single unders at an easy pace",
            advanced_modification="Add double unders",
        ),
        ExerciseTemplate(
            name="Rowing Machine Intervals", kind=_C, sets=5, duration_s=120, rest_time_s=60,
            instructions=(
                "Drive with the legs, then lean back, then pull",
                "Return in reverse order",
            ),
            muscle_groups=("back", "shoulder", "knee"),
            beginner_modification="Lower stroke rate",
            advanced_modification="Higher damper setting",
        ),
    ),
    (ExperienceLevel.ADVANCED, Goal.FAT_LOSS): (
        ExerciseTemplate(
            name="Running Intervals", kind=_C, sets=6, duration_s=180, rest_time_s=90,
            instructions=(
                "Run at a hard but sustainable pace",
                "Walk or jog easily during recoveries",
            ),
            muscle_groups=("knee", "ankle", "hip"),
            beginner_modification="Reduce pace",
            advanced_modification="Add hills",
        ),
        ExerciseTemplate(
            name="Assault Bike Sprints", kind=_C, sets=8, duration_s=30, rest_time_s=60,
            instructions=(
                "Sprint with arms and legs together",
                "Pedal slowly during rest",
            ),
            muscle_groups=("knee", "shoulder"),
            beginner_modification="Fewer sprints",
            advanced_modification="Shorter rest",
        ),
        ExerciseTemplate(
            name="Stair Climber", kind=_C, duration_s=1200, rest_time_s=0,
            instructions=(
                "Keep an upright posture",
                "Avoid leaning on the rails",
            ),
            muscle_groups=("knee", "hip", "glutes"),
            beginner_modification="Slower step rate",
            advanced_modification="Carry light dumbbells",
        ),
    ),
    # --- Muscle growth: moderate steady-state to protect recovery ---
    (ExperienceLevel.BEGINNER, Goal.MUSCLE_GROWTH): (
        ExerciseTemplate(
            name="Walking", kind=_C, duration_s=1200, rest_time_s=0,
            instructions=(
                "Maintain steady pace",
                "Focus on breathing",
                "Keep good posture",
            ),
            muscle_groups=("knee", "ankle"),
            beginner_modification="Start with 10 minutes",
            advanced_modification="Add incline or intervals",
        ),
        ExerciseTemplate(
            name="Stationary Cycling", kind=_C, duration_s=900, rest_time_s=0,
            instructions=(
                "Set the saddle at hip height",
                "Pedal at a conversational effort",
            ),
            muscle_groups=("knee",),
            beginner_modification="Low resistance",
            advanced_modification="Add short surges",
        ),
    ),
    (ExperienceLevel.INTERMEDIATE, Goal.MUSCLE_GROWTH): (
        ExerciseTemplate(
            name="Jogging", kind=_C, duration_s=1500, rest_time_s=0,
            instructions=(
                "Maintain comfortable pace",
                "Land on midfoot",
                "Keep arms relaxed",
            ),
            muscle_groups=("knee", "ankle"),
            beginner_modification="Walk/jog intervals",
            advanced_modification="Increase pace or distance",
        ),
        ExerciseTemplate(
            name="Incline Treadmill Walk", kind=_C, duration_s=1200, rest_time_s=0,
            instructions=(
                "Set a 6-10% incline",
                "Walk without holding the rails",
            ),
            muscle_groups=("ankle", "calf"),
            beginner_modification="Lower incline",
            advanced_modification="Steeper incline",
        ),
    ),
    (ExperienceLevel.ADVANCED, Goal.MUSCLE_GROWTH): (
        ExerciseTemplate(
            name="Running", kind=_C, duration_s=1800, rest_time_s=0,
            instructions=(
                "Maintain target pace",
                "Focus on form",
                "Control breathing",
            ),
            muscle_groups=("knee", "ankle", "hip"),
            beginner_modification="Reduce pace",
            advanced_modification="Add intervals or hills",
        ),
        ExerciseTemplate(
            name="Rowing Machine", kind=_C, duration_s=1200, rest_time_s=0,
            instructions=(
                "Hold a steady stroke rate",
                "Drive with the legs first",
            ),
            muscle_groups=("back", "shoulder", "knee"),
            beginner_modification="Lower stroke rate",
            advanced_modification="Negative split the second half",
        ),
    ),
}

# ---------------------------------------------------------------------------
# Cooldown stretches — first non-excluded entry is used
# ---------------------------------------------------------------------------

_BREATHING_COOLDOWN = ExerciseTemplate(
    name="Box Breathing Cooldown", kind=_F, sets=1, duration_s=120, rest_time_s=0,
    instructions=(
        "Sit or lie comfortably",
        "Inhale 4 s, hold 4 s, exhale 4 s, hold 4 s",
    ),
)

FLEXIBILITY_TABLE: dict[ExperienceLevel, tuple[ExerciseTemplate, ...]] = {
    ExperienceLevel.BEGINNER: (
        ExerciseTemplate(
            name="Cat-Cow Stretch", kind=_F, sets=2, duration_s=30, rest_time_s=15,
            instructions=(
                "Start on hands and knees",
                "Alternate arching and rounding the spine with the breath",
            ),
            muscle_groups=("lower back", "wrist"),
        ),
        _BREATHING_COOLDOWN,
    ),
    ExperienceLevel.INTERMEDIATE: (
        ExerciseTemplate(
            name="World's Greatest Stretch", kind=_F, sets=2, duration_s=45, rest_time_s=15,
            instructions=(
                "Step into a deep lunge",
                "Drop the inside elbow toward the front foot",
                "Rotate and reach the same arm to the ceiling",
            ),
            muscle_groups=("hip", "shoulder"),
        ),
        ExerciseTemplate(
            name="Standing Hamstring Stretch", kind=_F, sets=2, duration_s=30, rest_time_s=15,
            instructions=(
                "Place one heel forward with the toes up",
                "Hinge at the hips until you feel the stretch",
            ),
            muscle_groups=("hamstrings", "lower back"),
        ),
        _BREATHING_COOLDOWN,
    ),
    ExperienceLevel.ADVANCED: (
        ExerciseTemplate(
            name="Pigeon Pose", kind=_F, sets=2, duration_s=60, rest_time_s=15,
            instructions=(
                "Bring one shin forward across the mat",
                "Extend the other leg behind and sink the hips",
            ),
            muscle_groups=("hip", "knee"),
        ),
        ExerciseTemplate(
            name="Thoracic Rotations", kind=_F, sets=2, reps=10, rest_time_s=15,
            instructions=(
                "Lie on your side with knees bent",
                "Open the top arm across the body and follow it with your eyes",
            ),
            muscle_groups=("back", "shoulder"),
        ),
        _BREATHING_COOLDOWN,
    ),
}

# ---------------------------------------------------------------------------
# Generic fallbacks when injuries exclude every candidate for a day.
# Ordered by impact, lowest first; the last entry loads no tagged structure.
# ---------------------------------------------------------------------------

FALLBACK_TABLE: dict[SessionFocus, tuple[ExerciseTemplate, ...]] = {
    SessionFocus.STRENGTH: (
        ExerciseTemplate(
            name="Glute Bridge Hold", kind=_S, sets=3, duration_s=30, rest_time_s=60,
            instructions=(
                "Lie on your back with knees bent",
                "Lift the hips and hold",
            ),
            muscle_groups=("glutes", "hip"),
        ),
        ExerciseTemplate(
            name="Supine Core Bracing", kind=_S, sets=3, duration_s=30, rest_time_s=60,
            instructions=(
                "Lie on your back with knees bent",
                "Brace the abdominals as if expecting a light poke",
                "Breathe steadily while holding the brace",
            ),
            muscle_groups=("core",),
        ),
        ExerciseTemplate(
            name="Seated Isometric Holds", kind=_S, sets=3, duration_s=20, rest_time_s=60,
            instructions=(
                "Sit tall in a chair",
                "Press palms together and hold with gentle tension",
            ),
        ),
    ),
    SessionFocus.CARDIO: (
        ExerciseTemplate(
            name="Recumbent Cycling", kind=_C, duration_s=900, rest_time_s=0,
            instructions=(
                "Pedal at an easy, steady cadence",
                "Keep the back against the seat",
            ),
            muscle_groups=("knee",),
        ),
        ExerciseTemplate(
            name="Seated Arm Ergometer", kind=_C, duration_s=600, rest_time_s=0,
            instructions=(
                "Crank at a steady pace",
                "Keep shoulders relaxed",
            ),
            muscle_groups=("shoulder", "elbow"),
        ),
        ExerciseTemplate(
            name="Pool Walking", kind=_C, duration_s=900, rest_time_s=0,
            instructions=(
                "Walk in chest-deep water",
                "Keep an easy, continuous pace",
            ),
        ),
    ),
}


def split_for(goal: Goal, position: int) -> WorkoutSplit:
    """The split for the ``position``-th strength day of the week (0-based)."""
    splits = STRENGTH_SPLITS[goal]
    return splits[position % len(splits)]


def split_exercises(
    split: WorkoutSplit, level: ExperienceLevel, goal: Goal,
) -> tuple[ExerciseTemplate, ...]:
    """Resolve a split's exercise names against the level/goal strength pool.

    Raises:
        KeyError: If a name is missing from the pool.
    """
    pool = {e.name: e for e in STRENGTH_TABLE[(level, goal)]}
    return tuple(pool[name] for name in split.exercise_names[level])


def candidates_for(
    focus: SessionFocus,
    level: ExperienceLevel,
    goal: Goal,
    split: WorkoutSplit | None = None,
) -> tuple[ExerciseTemplate, ...]:
    """Look up the main-set candidates for a training day.

    Strength days with a ``split`` draw from that split; without one they
    get the whole level/goal pool.

    Raises:
        KeyError: If no table entry exists for the combination.
    """
    if focus == SessionFocus.CARDIO:
        return CARDIO_TABLE[(level, goal)]
    if split is not None:
        return split_exercises(split, level, goal)
    return STRENGTH_TABLE[(level, goal)]
