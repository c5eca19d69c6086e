"""
Management command to populate the database with demo treatment data.
"""
import random

from django.core.management.base import BaseCommand
from django.db import transaction

from treatment.models import Dose, Medication, Patient, Physician
from treatment.services.doses import add_dose, set_dose_state
from treatment.services.medications import add_medication
from treatment.services.patients import add_patient
from treatment.services.physicians import add_physician


class Command(BaseCommand):
    help = 'Populate database with demo physicians, patients, medications and doses'

    def add_arguments(self, parser):
        parser.add_argument('--flush', action='store_true', help='Delete every treatment record first')
        parser.add_argument('--days', type=int, default=3, help='Number of days of scheduled doses')
        parser.add_argument('--seed', type=int, default=None, help='Random seed for reproducible data')

    def handle(self, *args, **options):
        rng = random.Random(options['seed'])
        with transaction.atomic():
            if options['flush']:
                # Patients without a physician are not reached by the physician cascade
                removed = Physician.objects.all().delete()[0] + Patient.objects.all().delete()[0]
                self.stdout.write(f'Supprimé {removed} enregistrements existants')

            physicians = self.create_physicians()
            patients = self.create_patients(physicians, rng)
            medications = self.create_medications(patients, rng)
            self.create_doses(medications, options['days'], rng)

        self.stdout.write(self.style.SUCCESS(
            f'Données créées : {Physician.objects.count()} médecins, {Patient.objects.count()} patients, '
            f'{Medication.objects.count()} médicaments, {Dose.objects.count()} prises.'
        ))

    def create_physicians(self):
        physicians_data = [
            ('Martin', 'Claire', 'Endocrinologie'),
            ('Bernard', 'Luc', 'Cardiologie'),
            ('Petit', 'Sophie', 'Pneumologie'),
        ]
        physicians = []
        for name, first_name, specialty in physicians_data:
            physician = add_physician(name=name, first_name=first_name, specialty=specialty)
            physicians.append(physician)
            self.stdout.write(f'Médecin créé : {physician}')
        return physicians

    def create_patients(self, physicians, rng):
        patients_data = [
            ('Dupont', 'Jean', 'diabète'),
            ('Durand', 'Marie', 'hypertension'),
            ('Leroy', 'Paul', 'asthme'),
            ('Moreau', 'Julie', 'diabète'),
            ('Simon', 'Louis', 'insuffisance cardiaque'),
            ('Laurent', 'Emma', 'BPCO'),
        ]
        patients = []
        for i, (name, first_name, condition) in enumerate(patients_data):
            physician = physicians[i % len(physicians)]
            patient, message = add_patient(
                name=name, first_name=first_name, age=rng.randint(18, 90),
                condition=condition, physician_id=physician.id,
            )
            patients.append(patient)
            self.stdout.write(message)
        return patients

    def create_medications(self, patients, rng):
        catalogue = {
            'diabète': [('Insuline', '10 UI', '2 fois par jour'), ('Metformine', '500 mg', '3 fois par jour')],
            'hypertension': [('Amlodipine', '5 mg', '1 fois par jour')],
            'asthme': [('Ventoline', '2 bouffées', 'si besoin'), ('Symbicort', '1 inhalation', '2 fois par jour')],
            'insuffisance cardiaque': [('Furosémide', '40 mg', '1 fois par jour')],
            'BPCO': [('Spiriva', '18 µg', '1 fois par jour')],
        }
        medications = []
        for patient in patients:
            for name, dose, frequency in catalogue.get(patient.condition, []):
                medication, message = add_medication(
                    name=name, dose=dose, frequency=frequency, patient_id=patient.id,
                )
                medications.append(medication)
                self.stdout.write(message)
        return medications

    def create_doses(self, medications, days, rng):
        times = ['08:00', '12:00', '20:00']
        for medication in medications:
            for day in range(1, days + 1):
                for time in rng.sample(times, 2):
                    dose, _ = add_dose(time=time, date=f'2024-03-{day:02d}', medication_id=medication.id)
                    # Roughly four doses out of five are taken
                    if rng.random() < 0.8:
                        set_dose_state(dose.id, True)
