"""Plain-text share messages for events and days."""

from datetime import date

from smartcal.dates import format_iso_date, sunday_index
from smartcal.models.event import ContactEvent, HolidayEvent, PersonalEvent
from smartcal.models.weather import WeatherInfo

WEEKDAYS = ["일", "월", "화", "수", "목", "금", "토"]

FOOTER = "스마트 달력에서 확인하세요!"


def display_date(day: date) -> str:
    """``M월 D일 (요일)``"""
    return f"{day.month}월 {day.day}일 ({WEEKDAYS[sunday_index(day)]})"


def exclusion_note(event: PersonalEvent) -> str:
    if event.exclude_saturday and event.exclude_sunday:
        return " (주말 제외)"
    if event.exclude_saturday:
        return " (토요일 제외)"
    if event.exclude_sunday:
        return " (일요일 제외)"
    return ""


def event_share_text(event: PersonalEvent | ContactEvent) -> str:
    """Share message for a single event."""
    if isinstance(event, PersonalEvent):
        status = "[완료]" if event.completed else "[진행중]"
        if event.is_range:
            period = (
                f"{format_iso_date(event.start_date)} ~ "
                f"{format_iso_date(event.end_date)}{exclusion_note(event)}"
            )
        else:
            period = format_iso_date(event.start_date)
    else:
        status = "[연락처]"
        period = format_iso_date(event.date)

    lines = [f"{status} 일정 안내", f"기간: {period}", f"제목: {event.title}"]
    if isinstance(event, ContactEvent) and event.phone_number:
        lines.append(f"전화번호: {event.phone_number}")
    if event.description:
        lines.append(f"설명: {event.description}")
    return "\n".join(lines) + f"\n\n{FOOTER}"


def day_share_text(
    day: date,
    events: list,
    holiday: HolidayEvent | None = None,
    weather: WeatherInfo | None = None,
) -> str:
    """Share message summarizing one day."""
    parts = [f"[스마트 달력] {display_date(day)} 정보"]
    if weather:
        parts.append(
            f"⛅ 날씨: {weather.icon} {round(weather.min_temp)}°/{round(weather.max_temp)}°"
        )
    if holiday:
        parts.append(f"🚩 공휴일: {holiday.title}")
    if events:
        items = [
            f"{'✅' if getattr(e, 'completed', False) else '•'} {e.title}" for e in events
        ]
        parts.append("📅 일정:\n" + "\n".join(items))
    else:
        parts.append("일정 없음")
    return "\n".join(parts) + f"\n\n{FOOTER}"
