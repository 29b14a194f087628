"""Display labels for plan output.

Every table is keyed by enum member and checked for completeness at
import, so a new SessionType without labels fails loudly instead of
falling back to the raw value.
"""

from enum import Enum
from typing import Literal

from nsplanner.models.common import Distance, IntervalType, RaceType, SessionType

Locale = Literal["es", "en"]

LOCALES: tuple[str, ...] = ("es", "en")
DEFAULT_LOCALE: Locale = "es"

SESSION_TYPE_LABELS: dict[str, dict[SessionType, str]] = {
    "es": {
        SessionType.EASY: "Fácil",
        SessionType.THRESHOLD: "Umbral",
        SessionType.LONG: "Tirada Larga",
        SessionType.TEST: "Test",
        SessionType.REST: "Descanso",
        SessionType.RACE: "Carrera",
    },
    "en": {
        SessionType.EASY: "Easy",
        SessionType.THRESHOLD: "Threshold",
        SessionType.LONG: "Long Run",
        SessionType.TEST: "Test",
        SessionType.REST: "Rest",
        SessionType.RACE: "Race",
    },
}

DISTANCE_LABELS: dict[str, dict[Distance, str]] = {
    "es": {
        Distance.FIVE_K: "5K",
        Distance.TEN_K: "10K",
        Distance.HALF_MARATHON: "Media Maratón",
        Distance.MARATHON: "Maratón",
    },
    "en": {
        Distance.FIVE_K: "5K",
        Distance.TEN_K: "10K",
        Distance.HALF_MARATHON: "Half Marathon",
        Distance.MARATHON: "Marathon",
    },
}

INTERVAL_LABELS: dict[str, dict[IntervalType, str]] = {
    "es": {
        IntervalType.SHORT: "Cortos (3-4')",
        IntervalType.MEDIUM: "Medios (6-8')",
        IntervalType.LONG: "Largos (10-12')",
    },
    "en": {
        IntervalType.SHORT: "Short (3-4')",
        IntervalType.MEDIUM: "Medium (6-8')",
        IntervalType.LONG: "Long (10-12')",
    },
}

RACE_TYPE_LABELS: dict[str, dict[RaceType, str]] = {
    "es": {
        RaceType.A: "Carrera A (prioritaria)",
        RaceType.B: "Carrera B (secundaria)",
    },
    "en": {
        RaceType.A: "Race A (priority)",
        RaceType.B: "Race B (secondary)",
    },
}

# Monday first
DAY_NAMES: dict[str, tuple[str, ...]] = {
    "es": ("Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo"),
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
}

DAY_ABBREVIATIONS: dict[str, tuple[str, ...]] = {
    "es": ("Lun", "Mar", "Mié", "Jue", "Vie", "Sáb", "Dom"),
    "en": ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
}

UI_TEXT: dict[str, dict[str, str]] = {
    "es": {
        "plan.title": "Tu Plan de Entrenamiento",
        "plan.week": "Semana",
        "plan.block": "Bloque",
        "plan.testWeek": "Semana de Test",
        "plan.paces": "Tus Ritmos",
        "plan.intervals": "Intervalos NS",
        "plan.volume": "Volumen estimado",
        "pace.threshold": "Umbral",
        "pace.easy": "Fácil",
        "form.validation.required": "Introduce al menos una marca",
        "form.validation.format": "Formato inválido (usa mm:ss)",
    },
    "en": {
        "plan.title": "Your Training Plan",
        "plan.week": "Week",
        "plan.block": "Block",
        "plan.testWeek": "Test Week",
        "plan.paces": "Your Paces",
        "plan.intervals": "NS Intervals",
        "plan.volume": "Estimated volume",
        "pace.threshold": "Threshold",
        "pace.easy": "Easy",
        "form.validation.required": "Enter at least one time",
        "form.validation.format": "Invalid format (use mm:ss)",
    },
}


def _require_complete(name: str, table: dict[str, dict], members: type[Enum]) -> None:
    for locale in LOCALES:
        missing = set(members) - set(table.get(locale, {}))
        if missing:
            values = ", ".join(sorted(member.value for member in missing))
            raise RuntimeError(f"{name} missing {locale} labels for: {values}")


_require_complete("SESSION_TYPE_LABELS", SESSION_TYPE_LABELS, SessionType)
_require_complete("DISTANCE_LABELS", DISTANCE_LABELS, Distance)
_require_complete("INTERVAL_LABELS", INTERVAL_LABELS, IntervalType)
_require_complete("RACE_TYPE_LABELS", RACE_TYPE_LABELS, RaceType)


def resolve_locale(locale: str | None) -> Locale:
    """Return the locale if supported, else the default."""
    return locale if locale in LOCALES else DEFAULT_LOCALE  # type: ignore[return-value]


def session_type_label(session_type: SessionType | str, locale: Locale = DEFAULT_LOCALE) -> str:
    """Label for a session type.

    Raises:
        ValueError: If ``session_type`` is not a SessionType value.
    """
    return SESSION_TYPE_LABELS[locale][SessionType(session_type)]


def distance_label(distance: Distance | str, locale: Locale = DEFAULT_LOCALE) -> str:
    return DISTANCE_LABELS[locale][Distance(distance)]


def interval_label(interval_type: IntervalType | str, locale: Locale = DEFAULT_LOCALE) -> str:
    return INTERVAL_LABELS[locale][IntervalType(interval_type)]


def race_type_label(race_type: RaceType | str, locale: Locale = DEFAULT_LOCALE) -> str:
    return RACE_TYPE_LABELS[locale][RaceType(race_type)]


def day_name(day: int, locale: Locale = DEFAULT_LOCALE, short: bool = False) -> str:
    """Name of a weekday, Monday = 1."""
    names = DAY_ABBREVIATIONS[locale] if short else DAY_NAMES[locale]
    if not 1 <= day <= len(names):
        raise ValueError(f"Day must be 1-7, got {day}")
    return names[day - 1]


def text(key: str, locale: Locale = DEFAULT_LOCALE) -> str:
    return UI_TEXT[locale][key]
