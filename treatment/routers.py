"""
URL mappings for the MedTrack API.

Paths follow ``/api/<records>/<action>`` for every record kind.  Note
that trailing slashes are deliberately omitted.
"""
from django.urls import path

from .views import doses, health, medications, patients, physicians


urlpatterns = [
    path('healthz', health.healthz, name='healthz'),
    # Physicians
    path('api/physicians/add', physicians.physician_add, name='physician-add'),
    path('api/physicians/all', physicians.physician_list, name='physician-list'),
    path('api/physicians/update', physicians.physician_update, name='physician-update'),
    path('api/physicians/delete/<int:pk>', physicians.physician_delete, name='physician-delete'),
    path('api/physicians/<int:pk>', physicians.physician_detail, name='physician-detail'),
    # Patients
    path('api/patients/add', patients.patient_add, name='patient-add'),
    path('api/patients/all', patients.patient_list, name='patient-list'),
    path('api/patients/paged', patients.patient_paged, name='patient-paged'),
    path('api/patients/update', patients.patient_update, name='patient-update'),
    path('api/patients/delete/<int:pk>', patients.patient_delete, name='patient-delete'),
    path('api/patients/<int:pk>', patients.patient_detail, name='patient-detail'),
    path('api/patients/<int:pk>/dossier', patients.patient_dossier, name='patient-dossier'),
    # Medications
    path('api/medications/add', medications.medication_add, name='medication-add'),
    path('api/medications/all', medications.medication_list, name='medication-list'),
    path('api/medications/update', medications.medication_update, name='medication-update'),
    path('api/medications/delete/<int:pk>', medications.medication_delete, name='medication-delete'),
    path('api/medications/<int:pk>', medications.medication_detail, name='medication-detail'),
    # Doses
    path('api/doses/add', doses.dose_add, name='dose-add'),
    path('api/doses/all', doses.dose_list, name='dose-list'),
    path('api/doses/update', doses.dose_update, name='dose-update'),
    path('api/doses/update-state', doses.dose_update_state, name='dose-update-state'),
    path('api/doses/missed/<int:patient_id>/<int:medication_id>', doses.dose_missed, name='dose-missed'),
    path('api/doses/delete/<int:pk>', doses.dose_delete, name='dose-delete'),
    path('api/doses/<int:pk>', doses.dose_detail, name='dose-detail'),
]
