"""
Service icon names mapped to Bootstrap Icons classes.
"""

DEFAULT_ICON = 'FileCheck'

ICON_CLASSES = {
    'BookOpen': 'bi-book',
    'FileText': 'bi-file-earmark-text',
    'Users': 'bi-people',
    'GraduationCap': 'bi-mortarboard',
    'Plane': 'bi-airplane',
    'FileCheck': 'bi-file-earmark-check',
    # aliases
    'Brain': 'bi-book',
    'TrendingUp': 'bi-file-earmark-text',
    'Settings': 'bi-file-earmark-check',
}

ICON_CHOICES = sorted(ICON_CLASSES)


def icon_class(name):
    """CSS class for an icon name; unknown names get the default glyph."""
    return ICON_CLASSES.get(name) or ICON_CLASSES[DEFAULT_ICON]


def normalize_icon(name):
    return name if name in ICON_CLASSES else DEFAULT_ICON
