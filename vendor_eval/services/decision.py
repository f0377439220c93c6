"""Vendor decision resolution from accept/reject votes."""
from typing import Dict, Iterable, Optional, Tuple

VOTE_ACCEPT = "ACCEPT"
VOTE_REJECT = "REJECT"
VOTES = (VOTE_ACCEPT, VOTE_REJECT)

DECISION_ACCEPTED = "ACCEPTED"
DECISION_REJECTED = "REJECTED"
DECISION_PENDING = "PENDING"


def _vote_parts(v) -> Tuple[object, str]:
    if isinstance(v, dict):
        return v["user_id"], v["vote"]
    return v.user_id, v.vote


def latest_votes(votes: Iterable) -> Dict[object, str]:
    """Latest vote per voter; later entries win over earlier ones."""
    latest: Dict[object, str] = {}
    for v in votes:
        user_id, vote = _vote_parts(v)
        latest[user_id] = vote
    return latest


def tally_votes(votes: Iterable) -> Dict[str, int]:
    counted = latest_votes(votes).values()
    return {
        VOTE_ACCEPT: sum(1 for v in counted if v == VOTE_ACCEPT),
        VOTE_REJECT: sum(1 for v in counted if v == VOTE_REJECT),
    }


def resolve_decision(votes: Iterable) -> str:
    """Majority of the latest vote per voter; ties and no votes are PENDING.

    ``votes`` is a chronological sequence of objects (or dicts) with
    ``user_id`` and ``vote``. Every voter counts the same.
    """
    tally = tally_votes(votes)
    if tally[VOTE_ACCEPT] > tally[VOTE_REJECT]:
        return DECISION_ACCEPTED
    if tally[VOTE_REJECT] > tally[VOTE_ACCEPT]:
        return DECISION_REJECTED
    return DECISION_PENDING


def next_final_decision(current: Optional[str], resolved: str) -> Optional[str]:
    """Value to store on the vendor: PENDING keeps whatever was there."""
    if resolved == DECISION_PENDING:
        return current
    return resolved
