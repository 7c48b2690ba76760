from enum import Enum


class LogAction(str, Enum):

    entry = "entry"
    issue = "issue"
