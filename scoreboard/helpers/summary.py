"""
Read-only views over the result store.

Every call re-reads the store; nothing is cached between requests, so a
result is visible on the next read after it is appended.
"""


def leaderboard_rows(store, label="Bonus") -> list[dict]:
    """All results in store order, keyed by the persisted column names."""
    return [r.to_record(label) for r in store.list_all()]


def climber_summary(store) -> list[dict]:
    """
    One row per climber with the routes they have a result for.

    Climbers appear in order of their first result; routes keep store order.
      [{"climber": "A", "routes": ["Route 1", "Route 2"], "count": 2}, ...]
    """
    by_climber: dict[str, list[str]] = {}
    for r in store.list_all():
        by_climber.setdefault(r.climber, []).append(r.route)

    return [
        {"climber": climber, "routes": routes, "count": len(routes)}
        for climber, routes in by_climber.items()
    ]


def submitted_pairs(store) -> list[dict]:
    return [{"climber": r.climber, "route": r.route} for r in store.list_all()]
