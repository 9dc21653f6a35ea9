"""
Management command to populate the database with sample patients and
clinical data points.
"""
import random
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from clinicals.models import ClinicalData, Patient

FIRST_NAMES = ['Alice', 'Bob', 'Carmen', 'Dev', 'Elena', 'Farid', 'Grace', 'Hiro', 'Ines', 'Jonas']
LAST_NAMES = ['Johnson', 'Smith', 'Garcia', 'Patel', 'Novak', 'Haddad', 'Okafor', 'Tanaka', 'Silva', 'Berg']

# component name -> value generator
COMPONENTS = {
    'Blood Pressure': lambda: f'{random.randint(100, 150)}/{random.randint(60, 95)}',
    'Heart Rate': lambda: str(random.randint(55, 110)),
    'Temperature': lambda: f'{random.uniform(36.0, 38.5):.1f}',
    'Weight': lambda: str(random.randint(45, 120)),
    'Height': lambda: str(random.randint(150, 200)),
}


class Command(BaseCommand):
    help = 'Populate database with sample patients and clinical data'

    def add_arguments(self, parser):
        parser.add_argument('--patients', type=int, default=5, help='Number of patients to create')
        parser.add_argument('--readings', type=int, default=3, help='Clinical data points per patient')
        parser.add_argument('--flush', action='store_true', help='Delete existing patients and clinical data first')
        parser.add_argument('--seed', type=int, default=None, help='Random seed for repeatable data')

    def handle(self, *args, **options):
        if options['seed'] is not None:
            random.seed(options['seed'])

        with transaction.atomic():
            if options['flush']:
                deleted_data, _ = ClinicalData.objects.all().delete()
                deleted_patients, _ = Patient.objects.all().delete()
                self.stdout.write(f'Removed {deleted_patients} patients and {deleted_data} clinical data rows')

            patients = self.create_patients(options['patients'])
            readings = self.create_clinical_data(patients, options['readings'])

        self.stdout.write(self.style.SUCCESS(
            f'Created {len(patients)} patients and {len(readings)} clinical data rows'
        ))

    def create_patients(self, count):
        return [
            Patient.objects.create(
                first_name=random.choice(FIRST_NAMES),
                last_name=random.choice(LAST_NAMES),
                age=random.randint(1, 95),
            )
            for _ in range(count)
        ]

    def create_clinical_data(self, patients, per_patient):
        now = timezone.now()
        rows = []
        for patient in patients:
            for _ in range(per_patient):
                name = random.choice(list(COMPONENTS))
                rows.append(ClinicalData(
                    patient=patient,
                    component_name=name,
                    component_value=COMPONENTS[name](),
                    measured_date_time=now - timedelta(hours=random.randint(0, 24 * 30)),
                ))
        return ClinicalData.objects.bulk_create(rows)
