"""Translation table used to render notification titles and messages.

Resolution is pure: the language code is matched exactly, then by its
primary subtag (``ur-PK`` becomes ``ur``), then English. A kind without a
translation in the chosen language falls back to English, and a kind with no
entry at all falls back to the ``general`` text.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from primeform.domain.entities import NotificationKind

DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class LocalizedContent:
    """Title and message rendered for a single language."""

    title: str
    message: str


TRANSLATIONS: dict[str, dict[NotificationKind, tuple[str, str]]] = {
    "en": {
        NotificationKind.WELCOME: (
            "Welcome to PrimeForm! 🎉",
            "Hi {name}! Welcome to PrimeForm - your AI-powered fitness companion. "
            "Start your journey by creating your personalized diet and workout plans.",
        ),
        NotificationKind.DIET_PLAN_CREATED: (
            "AI Diet Plan Created! 🥗",
            "Your personalized AI diet plan has been successfully created. "
            "Check it out and start your nutrition journey!",
        ),
        NotificationKind.WORKOUT_PLAN_CREATED: (
            "AI Workout Plan Created! 💪",
            "Your personalized AI workout plan is ready! "
            "Time to crush your fitness goals with your new routine.",
        ),
        NotificationKind.GENERAL: (
            "Notification",
            "You have a new notification from PrimeForm.",
        ),
        NotificationKind.BADGE_EARNED: (
            "Profile Completion Badge Earned! 🏆",
            "Congratulations {name}! You've earned the Profile Completion Badge! "
            "Your profile is now complete and ready for personalized plans.",
        ),
        NotificationKind.DIET_REMINDER: (
            "PrimeForm - Diet Reminder 🥗",
            "Time to check your diet plan! Stay on track with your nutrition goals today.",
        ),
        NotificationKind.WORKOUT_REMINDER: (
            "PrimeForm - Workout Reminder 💪",
            "Your workout is waiting! Let's crush your fitness goals today.",
        ),
        NotificationKind.GYM_REMINDER: (
            "PrimeForm - Gym Exercise Reminder 🏋️",
            "Ready for your gym session? Explore exercises and build your strength!",
        ),
        NotificationKind.STREAK_BROKEN_REMINDER: (
            "PrimeForm - Streak Alert ⚠️",
            "Don't let your streak break! Complete your daily tasks to maintain your progress.",
        ),
    },
    "ur": {
        NotificationKind.WELCOME: (
            "پرائم فارم میں خوش آمدید! 🎉",
            "سلام {name}! پرائم فارم میں خوش آمدید - آپ کا AI سے چلنے والا فٹنس ساتھی۔ "
            "اپنی ذاتی ڈائٹ اور ورکاؤٹ پلان بنا کر اپنا سفر شروع کریں۔",
        ),
        NotificationKind.DIET_PLAN_CREATED: (
            "AI ڈائٹ پلان تیار! 🥗",
            "آپ کا ذاتی AI ڈائٹ پلان کامیابی سے تیار ہو گیا ہے۔ "
            "اسے دیکھیں اور اپنا غذائی سفر شروع کریں!",
        ),
        NotificationKind.WORKOUT_PLAN_CREATED: (
            "AI ورکاؤٹ پلان تیار! 💪",
            "آپ کا ذاتی AI ورکاؤٹ پلان تیار ہے! "
            "اپنے نئے روٹین کے ساتھ اپنے فٹنس اہداف کو حاصل کرنے کا وقت ہے۔",
        ),
        NotificationKind.GENERAL: (
            "اطلاع",
            "آپ کو پرائم فارم سے ایک نئی اطلاع ہے۔",
        ),
        NotificationKind.BADGE_EARNED: (
            "پروفائل مکمل کرنے کا بیج حاصل! 🏆",
            "مبارک ہو {name}! آپ نے پروفائل مکمل کرنے کا بیج حاصل کیا ہے! "
            "آپ کا پروفائل اب مکمل ہے اور ذاتی منصوبوں کے لیے تیار ہے۔",
        ),
        NotificationKind.DIET_REMINDER: (
            "پرائم فارم - ڈائٹ یاد دہانی 🥗",
            "اپنے ڈائٹ پلان کو چیک کرنے کا وقت! آج اپنے غذائی اہداف پر قائم رہیں۔",
        ),
        NotificationKind.WORKOUT_REMINDER: (
            "پرائم فارم - ورکاؤٹ یاد دہانی 💪",
            "آپ کی ورکاؤٹ انتظار کر رہی ہے! آج اپنے فٹنس اہداف کو حاصل کریں۔",
        ),
        NotificationKind.GYM_REMINDER: (
            "پرائم فارم - جم ورزش یاد دہانی 🏋️",
            "اپنے جم سیشن کے لیے تیار؟ ورزشیں دریافت کریں اور اپنی طاقت بنائیں!",
        ),
        NotificationKind.STREAK_BROKEN_REMINDER: (
            "پرائم فارم - سٹریک الرٹ ⚠️",
            "اپنے سٹریک کو ٹوٹنے نہ دیں! "
            "اپنی پیش رفت برقرار رکھنے کے لیے اپنے روزانہ کام مکمل کریں۔",
        ),
    },
}

_missing_english = set(NotificationKind) - set(TRANSLATIONS[DEFAULT_LANGUAGE])
if _missing_english:  # pragma: no cover - guards future additions to the enum
    raise RuntimeError(
        "Missing English translation for kinds: "
        + ", ".join(sorted(kind.value for kind in _missing_english))
    )


class _BlankMissing(dict):
    def __missing__(self, key: str) -> str:
        return ""


def supported_languages() -> tuple[str, ...]:
    return tuple(TRANSLATIONS)


def normalize_language(language: str | None) -> str:
    """Return the supported language code that best matches ``language``."""

    code = (language or "").strip().lower().replace("_", "-")
    if code in TRANSLATIONS:
        return code
    primary = code.split("-", 1)[0]
    if primary in TRANSLATIONS:
        return primary
    return DEFAULT_LANGUAGE


def _render(template: str, params: Mapping[str, Any]) -> str:
    values = _BlankMissing(
        {key: "" if value is None else str(value) for key, value in params.items()}
    )
    return template.format_map(values)


def resolve(
    kind: NotificationKind | str,
    language: str | None,
    params: Mapping[str, Any] | None = None,
) -> LocalizedContent:
    """Return the localised title and message for ``kind``."""

    table = TRANSLATIONS[normalize_language(language)]
    english = TRANSLATIONS[DEFAULT_LANGUAGE]
    entry = table.get(kind) or english.get(kind)
    if entry is None:
        entry = table.get(NotificationKind.GENERAL) or english[NotificationKind.GENERAL]

    title, message = entry
    params = params or {}
    return LocalizedContent(title=_render(title, params), message=_render(message, params))


__all__ = [
    "DEFAULT_LANGUAGE",
    "LocalizedContent",
    "TRANSLATIONS",
    "normalize_language",
    "resolve",
    "supported_languages",
]
