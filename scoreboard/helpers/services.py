from flask import current_app

# keys under app.extensions
STORE_KEY = "scoreboard.store"
ROSTER_KEY = "scoreboard.roster"
SUBMISSIONS_KEY = "scoreboard.submissions"


def get_store():
    return current_app.extensions[STORE_KEY]


def get_roster():
    return current_app.extensions[ROSTER_KEY]


def get_submission_service():
    return current_app.extensions[SUBMISSIONS_KEY]


def milestone_label() -> str:
    return current_app.config.get("MILESTONE_LABEL", "Bonus")
