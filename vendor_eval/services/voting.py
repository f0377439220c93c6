from datetime import datetime

from flask import current_app

from ..extensions import db
from ..models.vendor import Vendor
from ..models.vote import VendorVote
from .decision import VOTES, next_final_decision, resolve_decision, tally_votes


def cast_vote(vendor_id: int, user_id: int, vote: str):
    """Upsert a user's vote and recompute the vendor's final decision.

    Runs as one transaction with the vendor row locked, so concurrent
    votes on the same vendor cannot lose each other's decision update.
    Returns ``(vendor, resolved, tally, changed)``.
    """
    if vote not in VOTES:
        raise ValueError(f"vote must be one of {', '.join(VOTES)}")
    try:
        vendor = (Vendor.query
                  .filter_by(id=vendor_id)
                  .with_for_update()
                  .first())
        if vendor is None:
            db.session.rollback()
            return None, None, None, False

        row = VendorVote.query.filter_by(vendor_id=vendor_id, user_id=user_id).first()
        if row:
            row.vote = vote
        else:
            row = VendorVote(vendor_id=vendor_id, user_id=user_id, vote=vote)
            db.session.add(row)
        db.session.flush()

        votes = VendorVote.query.filter_by(vendor_id=vendor_id).order_by(VendorVote.updated_at.asc(), VendorVote.id.asc()).all()
        resolved = resolve_decision(votes)
        previous = vendor.final_decision
        vendor.final_decision = next_final_decision(previous, resolved)
        changed = vendor.final_decision != previous
        if changed:
            vendor.decided_at = datetime.utcnow()
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    current_app.logger.info('vote vendor=%s user=%s vote=%s resolved=%s final=%s',
                            vendor_id, user_id, vote, resolved, vendor.final_decision)
    return vendor, resolved, tally_votes(votes), changed


def vendor_decision_summary(vendor):
    votes = VendorVote.query.filter_by(vendor_id=vendor.id).order_by(VendorVote.updated_at.asc(), VendorVote.id.asc()).all()
    return {
        "vendorId": vendor.id,
        "resolved": resolve_decision(votes),
        "finalDecision": vendor.final_decision,
        "tally": tally_votes(votes),
        "votes": [v.to_dict() for v in votes],
    }
