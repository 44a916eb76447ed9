"""
Form value helpers shared by the admin and account screens.
"""


class ValidationError(ValueError):
    """Submitted form data is unusable; the message is shown to the user."""


def clean(form, field):
    """Stripped string value of a form field, '' when absent."""
    return (form.get(field) or '').strip()


def optional(form, field):
    """Stripped string value or None when blank."""
    return clean(form, field) or None


def require(form, field, message):
    value = clean(form, field)
    if not value:
        raise ValidationError(message)
    return value


def parse_rating(val):
    try:
        rating = int(val)
    except (TypeError, ValueError):
        raise ValidationError('Rating must be a whole number between 1 and 5.')
    if rating < 1 or rating > 5:
        raise ValidationError('Rating must be a whole number between 1 and 5.')
    return rating


def is_valid_email(email):
    if not email or email.count('@') != 1 or any(c.isspace() for c in email):
        return False
    local, domain = email.split('@')
    if not local or '.' not in domain:
        return False
    # every label non-empty: no leading, trailing or doubled dots
    return all(domain.split('.'))


def testimonial_fields(form):
    """Column values for a testimonial from submitted form data."""
    return {
        'name': require(form, 'name', 'Name is required.'),
        'role': optional(form, 'role'),
        'content': require(form, 'content', 'Testimonial text is required.'),
        'rating': parse_rating(form.get('rating', 5)),
        'avatar_url': optional(form, 'avatar_url'),
    }
