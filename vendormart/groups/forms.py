"""Forms for the groups blueprint."""

import math

from flask_wtf import FlaskForm
from wtforms import (
    DateTimeField,
    FloatField,
    IntegerField,
    SelectField,
    StringField,
    TextAreaField,
    ValidationError,
)
from wtforms.validators import DataRequired, InputRequired, NumberRange, Optional

from .models import GroupBuyStatus

STATUS_CHOICES = [(status.value, status.value.title()) for status in GroupBuyStatus]
TIMESTAMP_FORMATS = ["%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M", "%Y-%m-%d"]


def _require_finite(field):
    if field.data is not None and not math.isfinite(field.data):
        raise ValidationError("Must be a finite number.")


class GroupBuyForm(FlaskForm):
    """Form for creating a new group buy."""

    title = StringField("Title", validators=[DataRequired()])
    description = TextAreaField("Description", validators=[DataRequired()])
    organizer = StringField("Organizer Name", validators=[DataRequired()])
    location = StringField("Location", validators=[DataRequired()])
    category = StringField("Category", validators=[DataRequired()])
    target_amount = FloatField(
        "Target Amount", validators=[InputRequired(), NumberRange(min=0.01)]
    )
    max_participants = IntegerField(
        "Max Participants", validators=[InputRequired(), NumberRange(min=1)]
    )
    savings = StringField("Savings", validators=[DataRequired()])
    status = SelectField(
        "Status", choices=STATUS_CHOICES, default=GroupBuyStatus.ACTIVE.value
    )
    time_left = StringField("Time Left", validators=[DataRequired()])
    expires_at = DateTimeField(
        "Expires At", format=TIMESTAMP_FORMATS, validators=[DataRequired()]
    )

    def validate_target_amount(self, field):
        _require_finite(field)

    def to_fields(self):
        """Return the creation fields keyed by their wire names."""
        return {
            "title": self.title.data,
            "description": self.description.data,
            "location": self.location.data,
            "category": self.category.data,
            "targetAmount": self.target_amount.data,
            "maxParticipants": self.max_participants.data,
            "savings": self.savings.data,
            "status": self.status.data,
            "timeLeft": self.time_left.data,
            "expiresAt": self.expires_at.data,
        }


class EditGroupBuyForm(FlaskForm):
    """Form for editing a group buy; blank fields are left unchanged."""

    title = StringField("Title", validators=[Optional()])
    description = TextAreaField("Description", validators=[Optional()])
    location = StringField("Location", validators=[Optional()])
    category = StringField("Category", validators=[Optional()])
    target_amount = FloatField(
        "Target Amount", validators=[Optional(), NumberRange(min=0.01)]
    )
    max_participants = IntegerField(
        "Max Participants", validators=[Optional(), NumberRange(min=1)]
    )
    savings = StringField("Savings", validators=[Optional()])
    status = SelectField(
        "Status",
        choices=[("", "")] + STATUS_CHOICES,
        default="",
        validators=[Optional()],
    )
    time_left = StringField("Time Left", validators=[Optional()])
    expires_at = DateTimeField(
        "Expires At", format=TIMESTAMP_FORMATS, validators=[Optional()]
    )

    def validate_target_amount(self, field):
        _require_finite(field)

    def to_fields(self):
        """Return only the submitted fields, keyed by their wire names."""
        fields = {
            "title": self.title.data,
            "description": self.description.data,
            "location": self.location.data,
            "category": self.category.data,
            "targetAmount": self.target_amount.data,
            "maxParticipants": self.max_participants.data,
            "savings": self.savings.data,
            "status": self.status.data,
            "timeLeft": self.time_left.data,
            "expiresAt": self.expires_at.data,
        }
        return {key: value for key, value in fields.items() if value not in (None, "")}


class JoinGroupForm(FlaskForm):
    """Form for joining a group buy with a contribution."""

    contribution = FloatField(
        "Contribution", validators=[InputRequired(), NumberRange(min=0)]
    )

    def validate_contribution(self, field):
        _require_finite(field)
