from __future__ import annotations

from fortnite_stats.providers.base.errors import InvalidInputError
from fortnite_stats.providers.base.types import AccountType, PlayerQuery, TimeWindow

USAGE = "Usage: FORTNITE_API_KEY=your_api_key fortnite-stats <username|accountId> [accountType]"
SUPPORTED_ACCOUNT_TYPES = f"Supported account types: {', '.join(t.value for t in AccountType)}"


def resolve_query(
    identifier: str | None,
    account_type: str | None = None,
    *,
    time_window: TimeWindow = TimeWindow.SEASON,
) -> PlayerQuery:
    if identifier is None or not identifier.strip():
        raise InvalidInputError(
            "Username or Account ID is required",
            hints=[USAGE, SUPPORTED_ACCOUNT_TYPES],
        )

    raw_type = AccountType.EPIC.value if account_type is None else account_type
    try:
        resolved_type = AccountType(raw_type)
    except ValueError:
        raise InvalidInputError(
            f"Invalid account type '{raw_type}'",
            hints=[SUPPORTED_ACCOUNT_TYPES],
        ) from None

    return PlayerQuery(
        identifier=identifier.strip(),
        account_type=resolved_type,
        time_window=time_window,
    )
