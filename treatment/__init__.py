"""Treatment records application.

This package contains the models, services, serializers, views and route
registrations for physicians, patients, medications and doses.
"""
