#!/usr/bin/env python3
"""Recompute derived values from stored inputs.

- evaluations.overall_score from the stored criterion columns, only for
  rows scored under the current rubric version; older rows keep the score
  they were submitted with
- vendors.final_decision from vendor_votes

Run from project root:
  python scripts/recompute_scores.py [--dry-run]
"""
import os
import sys
import argparse

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from vendor_eval import create_app
from vendor_eval.extensions import db
from vendor_eval.models.evaluation import Evaluation, STATUS_COMPLETED, STATUS_IN_PROGRESS
from vendor_eval.models.vendor import Vendor
from vendor_eval.models.vote import VendorVote
from vendor_eval.services.decision import next_final_decision, resolve_decision
from vendor_eval.services.rubric import RUBRIC_VERSION
from vendor_eval.services.scoring import compute_overall_score, compute_partial_score


def recompute_evaluations():
    """Return ``(changed, skipped)``; skipped rows belong to another rubric version."""
    changed = 0
    skipped = Evaluation.query.filter(Evaluation.rubric_version != RUBRIC_VERSION).count()
    for ev in Evaluation.query.filter_by(rubric_version=RUBRIC_VERSION).order_by(Evaluation.id).all():
        scores = ev.scores()
        if all(v is not None for v in scores.values()):
            overall, status = compute_overall_score(scores, ev.domain), STATUS_COMPLETED
        else:
            overall, status = compute_partial_score(scores, ev.domain), STATUS_IN_PROGRESS
        if ev.overall_score != overall or ev.status != status:
            ev.overall_score = overall
            ev.status = status
            changed += 1
    return changed, skipped


def recompute_decisions():
    changed = 0
    for vendor in Vendor.query.order_by(Vendor.id).all():
        votes = VendorVote.query.filter_by(vendor_id=vendor.id).order_by(VendorVote.updated_at.asc(), VendorVote.id.asc()).all()
        final = next_final_decision(vendor.final_decision, resolve_decision(votes))
        if final != vendor.final_decision:
            vendor.final_decision = final
            changed += 1
    return changed


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--dry-run', action='store_true', help='report changes without committing')
    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        ev_changed, ev_skipped = recompute_evaluations()
        vendor_changed = recompute_decisions()
        if args.dry_run:
            db.session.rollback()
        else:
            db.session.commit()
        app.logger.info('evaluations updated: %d, skipped (rubric != %s): %d, vendor decisions updated: %d%s',
                        ev_changed, RUBRIC_VERSION, ev_skipped, vendor_changed, ' (dry run)' if args.dry_run else '')
        print(f"Processed evaluations: {ev_changed} changed, {ev_skipped} skipped; vendors: {vendor_changed} changed.")


if __name__ == '__main__':
    main()
