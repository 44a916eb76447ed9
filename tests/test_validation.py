import pytest

from edureach.services.icons import icon_class, normalize_icon
from edureach.services.validation import (
    ValidationError, parse_rating, is_valid_email,
)
from edureach.services import validation
from edureach.services.consultation import validate_request, ConsultationValidationError


@pytest.mark.parametrize('value', ['0', '6', 'four', None, '2.5'])
def test_parse_rating_rejects_out_of_range(value):
    with pytest.raises(ValidationError):
        parse_rating(value)


def test_parse_rating_accepts_bounds():
    assert parse_rating('1') == 1
    assert parse_rating(5) == 5


def test_email_check():
    assert is_valid_email('maria@example.com')
    assert not is_valid_email('maria@localhost')
    assert not is_valid_email('@example.com')
    assert not is_valid_email('')


@pytest.mark.parametrize('email', ['a@b.', 'a@@b.c', 'a@.b.c', 'a@b..c', 'a b@c.d', 'a@b@c.d'])
def test_email_check_rejects_malformed_domains(email):
    assert not is_valid_email(email)


def test_testimonial_fields_blank_optionals_become_none():
    fields = validation.testimonial_fields({'name': ' Raj ', 'content': 'Good', 'role': '  '})
    assert fields == {'name': 'Raj', 'role': None, 'content': 'Good', 'rating': 5, 'avatar_url': None}


def test_unknown_icon_uses_default_glyph():
    assert normalize_icon('Rocket') == 'FileCheck'
    assert icon_class('Rocket') == icon_class('FileCheck')
    assert icon_class('Brain') == icon_class('BookOpen')


def test_consultation_validation_messages():
    with pytest.raises(ConsultationValidationError, match='required fields'):
        validate_request('Name', '', 'hi')
    with pytest.raises(ConsultationValidationError, match='valid email'):
        validate_request('Name', 'nope', 'hi')
