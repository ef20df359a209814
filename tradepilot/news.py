"""Sample economic calendar with a rule-based commentary line."""

from typing import Iterable, Optional

from tradepilot.models.news import NewsEvent

IMPACT_LEVELS = ["all", "low", "medium", "high"]
CURRENCIES = ["USD", "EUR", "GBP", "JPY", "CAD", "AUD", "NZD", "CHF"]
DEFAULT_CURRENCIES = ["USD", "EUR", "GBP"]

SAMPLE_EVENTS = [
    NewsEvent(time="08:30", ccy="USD", title="Non-Farm Payrolls", impact="high",
              forecast="+170k", previous="+187k", actual="—"),
    NewsEvent(time="07:00", ccy="GBP", title="BoE Gov Speech", impact="medium"),
    NewsEvent(time="10:00", ccy="EUR", title="CPI (YoY)", impact="high",
              forecast="2.8%", previous="3.1%", actual="—"),
    NewsEvent(time="13:30", ccy="CAD", title="Unemployment Rate", impact="medium",
              forecast="5.7%", previous="5.6%", actual="—"),
    NewsEvent(time="23:50", ccy="JPY", title="GDP (QoQ)", impact="low",
              forecast="0.2%", previous="0.1%", actual="—"),
]


def calendar_events(day: Optional[str] = None, impact: str = "all") -> list[NewsEvent]:
    """Return the sample calendar for ``day`` filtered by impact.

    The sample data does not vary by day; ``day`` is accepted so callers
    can be wired the same way a real feed would be.
    """
    if impact == "all":
        return list(SAMPLE_EVENTS)
    return [event for event in SAMPLE_EVENTS if event.impact == impact]


def filter_currencies(events: Iterable[NewsEvent], currencies: Iterable[str]) -> list[NewsEvent]:
    """Keep events in the selected currencies; an empty selection keeps all."""
    selected = {ccy.upper() for ccy in currencies}
    return [event for event in events if not selected or event.ccy in selected]


def insight(events: Iterable[NewsEvent]) -> str:
    """One-line session commentary for the visible events."""
    high_ccys: list[str] = []
    for event in events:
        if event.impact == "high" and event.ccy not in high_ccys:
            high_ccys.append(event.ccy)
    if high_ccys:
        return (
            f"High-impact ({', '.join(high_ccys)}) today. Expect wider ranges around "
            "release times; consider smaller size pre-event and fade/continuation "
            "setups on the first pullback after actuals."
        )
    return (
        "Calendar is light-to-medium impact. Mean-reversion setups in Asia/London, "
        "watch overlap for liquidity spikes."
    )
