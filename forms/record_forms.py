from flask_wtf import FlaskForm
from wtforms import StringField, SelectField, SubmitField, DateField, IntegerField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange, Optional, ValidationError

from filters import ALL, CATEGORIES, STATUSES
from models.person import Person
from models.records import SEX_CHOICES, REQUESTER_CHOICES

SEX_SELECT = [(value, value) for value in SEX_CHOICES]
REQUESTER_SELECT = [(value, value) for value in REQUESTER_CHOICES]
STATUS_SELECT = [(value, value) for value in STATUSES]


def name_field(label):
    return StringField(label, validators=[DataRequired(), Length(max=200)])


def age_field(label):
    return IntegerField(label, validators=[InputRequired(), NumberRange(min=18, max=150)])


class AddressMixin:
    city = StringField("City", validators=[DataRequired(), Length(max=100)])
    kebele = StringField("Kebele", validators=[DataRequired(), Length(max=100)])
    house_number = StringField("House Number", validators=[Optional(), Length(max=50)])
    registration_date = DateField("Registration Date", validators=[Optional()])


class PersonLinkMixin:
    person_id = StringField("Person ID", validators=[Optional(), Length(max=50)])

    def validate_person_id(self, field):
        if Person.get_by_id(field.data.strip()) is None:
            raise ValidationError("No registered person has this ID.")


class BirthForm(PersonLinkMixin, AddressMixin, FlaskForm):
    child_name = name_field("Child Full Name")
    date_of_birth = DateField("Date of Birth", validators=[DataRequired()])
    sex = SelectField("Sex", choices=SEX_SELECT, validators=[DataRequired()])
    nationality = StringField("Nationality", validators=[DataRequired(), Length(max=100)])
    mother_name = name_field("Mother Full Name")
    father_name = name_field("Father Full Name")
    submit = SubmitField("Register Birth")


class DeathForm(PersonLinkMixin, AddressMixin, FlaskForm):
    name = name_field("Full Name")
    birth_regno = StringField("Birth Registration Number", validators=[Optional(), Length(max=50)])
    date_of_birth = DateField("Date of Birth", validators=[DataRequired()])
    date_of_death = DateField("Date of Death", validators=[DataRequired()])
    sex = SelectField("Sex", choices=SEX_SELECT, validators=[DataRequired()])
    nationality = StringField("Nationality", validators=[DataRequired(), Length(max=100)])
    cause_of_death = StringField("Cause of Death", validators=[DataRequired(), Length(max=500)])
    submit = SubmitField("Register Death")

    def validate_date_of_death(self, field):
        if self.date_of_birth.data and field.data and field.data < self.date_of_birth.data:
            raise ValidationError("Date of death cannot be before date of birth.")


class MarriageForm(AddressMixin, FlaskForm):
    husband_name = name_field("Husband Full Name")
    husband_age = age_field("Husband Age")
    husband_nationality = StringField("Husband Nationality", validators=[DataRequired()])
    wife_name = name_field("Wife Full Name")
    wife_age = age_field("Wife Age")
    wife_nationality = StringField("Wife Nationality", validators=[DataRequired()])
    date_of_marriage = DateField("Date of Marriage", validators=[DataRequired()])
    submit = SubmitField("Register Marriage")


class DivorceForm(AddressMixin, FlaskForm):
    husband_name = name_field("Husband Full Name")
    husband_age = age_field("Husband Age")
    husband_nationality = StringField("Husband Nationality", validators=[DataRequired()])
    wife_name = name_field("Wife Full Name")
    wife_age = age_field("Wife Age")
    wife_nationality = StringField("Wife Nationality", validators=[DataRequired()])
    date_of_divorce = DateField("Date of Divorce", validators=[DataRequired()])
    requester = SelectField("Requester", choices=REQUESTER_SELECT, validators=[DataRequired()])
    submit = SubmitField("Register Divorce")


RECORD_FORMS = {
    "birth": BirthForm,
    "death": DeathForm,
    "marriage": MarriageForm,
    "divorce": DivorceForm,
}


class StatusForm(FlaskForm):
    status = SelectField("Status", choices=STATUS_SELECT, validators=[DataRequired()])
    submit = SubmitField("Update Status")


class SearchForm(FlaskForm):
    class Meta:
        csrf = False

    q = StringField("Search", validators=[Optional()])
    type = SelectField("Record Type", choices=[(ALL, ALL)] + [(c, c) for c in CATEGORIES],
                       default=ALL, validators=[Optional()])
    status = SelectField("Status", choices=[(ALL, ALL)] + STATUS_SELECT,
                         default=ALL, validators=[Optional()])
