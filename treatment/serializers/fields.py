import bleach
from rest_framework import serializers


class CleanCharField(serializers.CharField):
    """CharField that strips any HTML markup from the incoming value."""

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        value = bleach.clean(value, tags=[], strip=True).strip()
        if not value and not self.allow_blank:
            self.fail('blank')
        return value
