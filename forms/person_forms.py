from flask_wtf import FlaskForm
from wtforms import StringField, SelectField, SubmitField, DateField
from wtforms.validators import DataRequired, Length, Optional, Regexp

GENDER_CHOICES = [("male", "Male"), ("female", "Female")]


class PersonForm(FlaskForm):
    first_name = StringField("First Name", validators=[DataRequired(), Length(max=100)])
    middle_name = StringField("Middle Name", validators=[Optional(), Length(max=100)])
    last_name = StringField("Last Name", validators=[DataRequired(), Length(max=100)])
    gender = SelectField("Gender", choices=GENDER_CHOICES, validators=[DataRequired()])
    date_of_birth = DateField("Date of Birth", validators=[Optional()])
    place_of_birth = StringField("Place of Birth", validators=[Optional(), Length(max=200)])
    nationality = StringField("Nationality", validators=[DataRequired(), Length(max=100)])
    region = StringField("Region", validators=[Optional(), Length(max=100)])
    zone = StringField("Zone", validators=[Optional(), Length(max=100)])
    woreda = StringField("Woreda", validators=[Optional(), Length(max=100)])
    kebele = StringField("Kebele", validators=[Optional(), Length(max=100)])
    house_number = StringField("House Number", validators=[Optional(), Length(max=50)])
    phone = StringField("Phone", validators=[
        Optional(), Regexp(r"^\+?[0-9 \-]{7,20}$", message="Invalid phone number.")
    ])
    submit = SubmitField("Save Person")
