from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired, Length, NoneOf, Regexp

from contact_manager.tagging import RESERVED_TAG_NAMES, TAG_SEPARATOR


class AddContactForm(FlaskForm):
    # CSRF is checked app-wide by CSRFProtect, tag checkboxes are read from
    # the raw form by the controller
    class Meta:
        csrf = False

    full_name = StringField(
        "Full name",
        validators=[DataRequired(message="Full name is required")],
        render_kw={"placeholder": "Kermit the Frog"},
    )
    phone_number = StringField("Phone number", render_kw={"placeholder": "12345"})
    email = StringField(
        "Email", render_kw={"placeholder": "green@kermitthefrog.com"}
    )
    submit = SubmitField("Add contact")


class TagForm(FlaskForm):
    class Meta:
        csrf = False

    name = StringField(
        "Name",
        validators=[
            DataRequired(message="Tag name is required"),
            Length(max=50),
            Regexp(
                rf"^[^{TAG_SEPARATOR}]*$",
                message=f'Tag name cannot contain "{TAG_SEPARATOR}"',
            ),
            NoneOf(RESERVED_TAG_NAMES, message="This name is reserved"),
        ],
        render_kw={"placeholder": "friend"},
    )
    submit = SubmitField("Add tag")
