from flask_wtf import FlaskForm
from wtforms import FloatField, SubmitField, TextAreaField
from wtforms.validators import NumberRange, Optional

from ...services.rubric import MAX_SCORE, MIN_SCORE, criteria_for


def evaluation_form_class(domain):
    """Build a form with one score field and one remark field per criterion."""

    class EvaluationForm(FlaskForm):
        save_progress = SubmitField("Save progress")
        submit = SubmitField("Submit evaluation")

    for c in criteria_for(domain):
        setattr(EvaluationForm, c.column, FloatField(
            f"{c.label} ({c.weight * 100:g}%)",
            validators=[Optional(), NumberRange(min=MIN_SCORE, max=MAX_SCORE)],
        ))
        setattr(EvaluationForm, f"{c.column}_remark", TextAreaField("Remark", render_kw={"rows": 2}))
    return EvaluationForm
