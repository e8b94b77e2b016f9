"""Personalized Plan — Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py

Read-only rendering of a generated plan with a Training / Nutrition toggle.
"""

from __future__ import annotations

import logging

import streamlit as st

from plan_engine import PlanEngine, PlanEngineError
from plan_engine.models.weekly_plan import TrainingDay
from plan_engine.serialization import to_plan_json_string

from helpers import (
    DAY_NAMES,
    FOCUS_COLORS,
    GOAL_OPTIONS,
    LEVEL_OPTIONS,
    MEAL_LABELS,
    REST_COLOR,
    build_fitness_user,
    day_heading,
    exercise_table,
    list_profiles,
    load_profile,
    macro_table,
    meal_table,
    save_profile,
    title_label,
    training_table,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Personalized Plan",
    page_icon="💪",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Cached engine
# ---------------------------------------------------------------------------


@st.cache_resource
def get_engine() -> PlanEngine:
    return PlanEngine()


def _bump_widget_version() -> None:
    """Increment the widget version so loaded profile values replace widget state."""
    st.session_state["_wv"] = st.session_state.get("_wv", 0) + 1


def _wk(name: str) -> str:
    """Return a versioned widget key like ``goal_v0``."""
    v = st.session_state.get("_wv", 0)
    return f"{name}_v{v}"


def _get_pdata(key: str, default):
    """Get value from loaded profile data, or return default."""
    return st.session_state.get("profile_data", {}).get(key, default)


def _as_text(value) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(value)
    return value or ""


# ---------------------------------------------------------------------------
# Sidebar — Fitness Profile
# ---------------------------------------------------------------------------

st.sidebar.title("Fitness Profile")

with st.sidebar.expander("About You", expanded=True):
    name = st.text_input("Name", value=_get_pdata("name", ""), key=_wk("name"))
    weight = st.number_input(
        "Weight (kg, 0 = unknown)", 0.0, 300.0, float(_get_pdata("weight", 0.0) or 0.0),
        step=0.5, key=_wk("weight"),
    )
    goal = st.selectbox(
        "Goal", GOAL_OPTIONS,
        index=GOAL_OPTIONS.index(_get_pdata("goal", "muscle_growth"))
        if _get_pdata("goal", "muscle_growth") in GOAL_OPTIONS else 0,
        format_func=lambda g: g.replace("_", " ").title(),
        key=_wk("goal"),
    )
    fitness_level = st.selectbox(
        "Fitness level", LEVEL_OPTIONS,
        index=LEVEL_OPTIONS.index(_get_pdata("fitnessLevel", "beginner"))
        if _get_pdata("fitnessLevel", "beginner") in LEVEL_OPTIONS else 0,
        format_func=str.title,
        key=_wk("level"),
    )

with st.sidebar.expander("Training Week", expanded=True):
    train_days = st.number_input(
        "Strength days per week", 0, 7, int(_get_pdata("trainDaysPerWeek", 3)),
        key=_wk("train_days"),
    )
    cardio_days = st.number_input(
        "Cardio days per week", 0, 7, int(_get_pdata("cardioDaysPerWeek", 1)),
        key=_wk("cardio_days"),
    )
    can_do_more = st.checkbox(
        "I can handle extra volume", value=bool(_get_pdata("canDoMore", False)),
        key=_wk("can_do_more"),
    )

with st.sidebar.expander("Nutrition & Health", expanded=True):
    daily_calories = st.number_input(
        "Daily calories (kcal)", 0, 10000, int(_get_pdata("dailyCalories", 2000)),
        step=50, key=_wk("calories"),
    )
    injuries_text = st.text_input(
        "Past injuries (comma-separated)",
        value=_as_text(_get_pdata("pastInjuries", [])),
        key=_wk("injuries"),
    )
    restrictions_text = st.text_input(
        "Dietary restrictions (comma-separated)",
        value=_as_text(_get_pdata("dietaryRestrictions", [])),
        key=_wk("restrictions"),
    )
    health_notes = st.text_area(
        "Additional health notes",
        value=_get_pdata("additionalHealthNotes", "") or "",
        key=_wk("notes"),
    )


def _collect_profile_from_sidebar() -> dict:
    """Collect all sidebar widget values into an onboarding dict."""
    return {
        "name": name,
        "weight": weight or None,
        "goal": goal,
        "fitnessLevel": fitness_level,
        "trainDaysPerWeek": int(train_days),
        "cardioDaysPerWeek": int(cardio_days),
        "canDoMore": can_do_more,
        "dailyCalories": daily_calories,
        "pastInjuries": injuries_text,
        "dietaryRestrictions": restrictions_text,
        "additionalHealthNotes": health_notes or None,
    }


# --- Profile load/save (after widget definitions so _collect works) ---
with st.sidebar.expander("Load / Save Profile"):
    profiles = list_profiles()
    if profiles:
        selected_profile = st.selectbox("Load profile", ["(none)"] + profiles)
        if st.button("Load") and selected_profile != "(none)":
            st.session_state["profile_data"] = load_profile(selected_profile)
            _bump_widget_version()
            st.rerun()
    else:
        st.caption("No saved profiles yet.")

    save_name = st.text_input("Save as", value="my_profile")
    if st.button("Save Profile"):
        save_profile(save_name, _collect_profile_from_sidebar())
        st.success(f"Saved as '{save_name}'")


# ---------------------------------------------------------------------------
# Main area
# ---------------------------------------------------------------------------

st.title("Your Personalized Plan")

if st.button("Generate Plan", type="primary"):
    try:
        user = build_fitness_user(_collect_profile_from_sidebar())
        previous = st.session_state.get("last_plan")
        engine = get_engine()
        if previous is None:
            st.session_state["last_plan"] = engine.generate_plan(user)
        else:
            st.session_state["last_plan"] = engine.revise_plan(previous, user)
    except PlanEngineError as e:
        st.error(f"Cannot generate plan: {e}")

plan = st.session_state.get("last_plan")

if plan is None:
    st.info("Fill in your profile and click **Generate Plan** to get started.")
    st.stop()

if plan.health_notes:
    st.info(f"**Health notes:** {plan.health_notes}")

view = st.radio("View", ["Training", "Nutrition"], horizontal=True)

# ---------------------------------------------------------------------------
# Training view
# ---------------------------------------------------------------------------

if view == "Training":
    week = plan.training_regimen
    mc1, mc2, mc3, mc4 = st.columns(4)
    mc1.metric("Training Days", str(week.training_day_count))
    mc2.metric("Rest Days", str(week.rest_day_count))
    mc3.metric("Est. kcal / week", str(week.estimated_calories_burned))
    if week.progression is not None:
        mc4.metric(
            "Phase",
            title_label(week.progression.phase),
            help=f"{week.progression.duration_weeks} weeks",
        )

    st.subheader("Week at a Glance")
    cols = st.columns(7)
    for col, entry in zip(cols, week.days):
        if isinstance(entry, TrainingDay):
            color = FOCUS_COLORS.get(entry.focus, "#CCCCCC")
            text = entry.workout_name or title_label(entry.focus)
            detail = f"{entry.estimated_calories} kcal"
        else:
            color, text, detail = REST_COLOR, "Rest", ""
        with col:
            st.markdown(
                f'<div style="background:{color};padding:10px;border-radius:8px;'
                f'text-align:center;min-height:90px;">'
                f"<strong>{DAY_NAMES[entry.day]}</strong><br>"
                f"{text}<br>"
                f"<small>{detail}</small>"
                f"</div>",
                unsafe_allow_html=True,
            )

    st.dataframe(training_table(week), hide_index=True, use_container_width=True)

    st.subheader("Daily Details")
    for day in week.training_days:
        with st.expander(day_heading(day)):
            st.dataframe(exercise_table(day), hide_index=True, use_container_width=True)
            for exercise in day.exercises:
                if exercise.instructions:
                    st.markdown(f"**{exercise.name}**")
                    st.markdown("\n".join(f"- {step}" for step in exercise.instructions))
            for note in day.notes:
                st.caption(note)

# ---------------------------------------------------------------------------
# Nutrition view
# ---------------------------------------------------------------------------

else:
    nutrition = plan.nutrition_regimen
    nc1, nc2, nc3 = st.columns(3)
    nc1.metric("Daily Calories", f"{nutrition.daily_calorie_target:.0f} kcal")
    nc2.metric("Hydration", f"{nutrition.hydration_target_l:.1f} L")
    nc3.metric("Plan Version", str(plan.version))

    st.subheader("Macro Targets")
    st.dataframe(macro_table(nutrition.macro_targets), use_container_width=True)

    st.subheader("Meals")
    for meal in nutrition.meal_plan:
        with st.expander(
            f"{MEAL_LABELS[meal.meal_type]} ({meal.target_calories:.0f} kcal)",
            expanded=True,
        ):
            st.dataframe(meal_table(meal), hide_index=True, use_container_width=True)

    st.subheader("Supplements")
    st.markdown("\n".join(f"- {s}" for s in nutrition.supplements))

st.divider()
st.download_button(
    "Download Plan (.json)",
    data=to_plan_json_string(plan),
    file_name=f"plan_v{plan.version}.json",
    mime="application/json",
)
