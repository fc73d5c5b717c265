"""
Caregiver daily report.

Renders today's activities for one patient as a short markdown report
with highlights and follow-up recommendations for family members.
"""

from datetime import date, datetime
from typing import Optional, Union

from .activity_types import ActivityCategory, ActivityType
from .log import day_key
from .summary import SummaryEngine, checkin_mood

MOOD_EMOJI = {
    "great": "😊",
    "good": "🙂",
    "okay": "😐",
    "low": "😔",
    "struggling": "😢",
}
UNKNOWN_MOOD_EMOJI = "❓"

# Activities needed for an "Active" engagement level
ACTIVE_THRESHOLD = 5


def build_daily_report(
    engine: SummaryEngine,
    patient_id: Optional[str],
    patient_name: Optional[str] = None,
    day: Optional[Union[date, datetime]] = None,
) -> str:
    """
    Build the markdown daily report.

    Args:
        engine: Summary engine over the activity log
        patient_id: Patient to report on
        patient_name: Display name (defaults to "the patient")
        day: Day to report on (defaults to today)

    Returns:
        Report text
    """
    name = patient_name or "the patient"
    day = day if day is not None else engine.now()
    activities = engine.for_date(day, patient_id)

    lines = [f"📋 **Daily Report for {name}** ({day_key(day)})", ""]

    if not activities:
        lines.append(f"No activities recorded yet today. Consider checking in with {name}.")
        return "\n".join(lines) + "\n"

    level = "Active" if len(activities) >= ACTIVE_THRESHOLD else "Moderate"
    lines.append(f"**Engagement Level:** {level}")
    lines.append(f"**Total Interactions:** {len(activities)}")
    lines.append("")

    moods = [checkin_mood(a) for a in activities if a.type == ActivityType.MOOD_CHECKIN.value]
    latest_mood = moods[0] if moods else None
    if latest_mood:
        emoji = MOOD_EMOJI.get(latest_mood, UNKNOWN_MOOD_EMOJI)
        lines.append(f"**Current Mood:** {emoji} {latest_mood}")
        lines.append("")

    voice = sum(1 for a in activities if a.type == ActivityType.VOICE_SESSION.value)
    cognitive = sum(1 for a in activities if a.type_info.category == ActivityCategory.COGNITIVE)
    meds = sum(1 for a in activities if a.type == ActivityType.MEDICATION_TAKEN.value)

    if voice or cognitive or meds:
        lines.append("**Today's Highlights:**")
        if voice:
            lines.append(f"• Had {voice} voice conversation{'s' if voice > 1 else ''}")
        if cognitive:
            lines.append(f"• Completed {cognitive} brain exercise{'s' if cognitive > 1 else ''}")
        if meds:
            lines.append("• Medication taken ✓")

    lines.append("")
    lines.append("**Recommendations:**")
    if not latest_mood:
        lines.append("• No mood check-in today - consider asking how they're feeling")
    if not voice:
        lines.append("• Encourage a voice session for social engagement")
    if not cognitive:
        lines.append("• Suggest a brain game or puzzle")

    return "\n".join(lines) + "\n"
