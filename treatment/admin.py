"""
Django admin registrations for the treatment models.

Lets superusers inspect and correct records through ``/admin/``.
Deleting a record here cascades exactly as it does through the API.
"""

from django.contrib import admin

from .models import Dose, Medication, Patient, Physician


@admin.register(Physician)
class PhysicianAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'first_name', 'specialty')
    search_fields = ('name', 'first_name', 'specialty')


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'first_name', 'age', 'condition', 'physician')
    list_filter = ('physician',)
    search_fields = ('name', 'first_name', 'condition')


@admin.register(Medication)
class MedicationAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'dose', 'frequency', 'patient')
    search_fields = ('name', 'patient__name', 'patient__first_name')


@admin.register(Dose)
class DoseAdmin(admin.ModelAdmin):
    list_display = ('id', 'date', 'time', 'administered', 'medication', 'patient')
    list_filter = ('administered',)
    search_fields = ('medication__name', 'patient__name', 'date')
