import django.core.validators
import django.db.models.deletion
from django.db import migrations, models

import treatment.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Physician',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, validators=[treatment.models.not_blank])),
                ('first_name', models.CharField(max_length=255, validators=[treatment.models.not_blank])),
                ('specialty', models.CharField(max_length=255, validators=[treatment.models.not_blank])),
            ],
            options={
                'verbose_name': 'médecin',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Patient',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, validators=[treatment.models.not_blank])),
                ('first_name', models.CharField(max_length=255, validators=[treatment.models.not_blank])),
                ('age', models.PositiveSmallIntegerField(validators=[
                    django.core.validators.MinValueValidator(1, message="L'âge doit être supérieur à 0"),
                    django.core.validators.MaxValueValidator(120, message="L'âge ne doit pas dépasser 120 ans"),
                ])),
                ('condition', models.CharField(max_length=255, validators=[treatment.models.not_blank])),
                ('physician', models.ForeignKey(
                    blank=True, null=True, on_delete=django.db.models.deletion.CASCADE,
                    related_name='patients', to='treatment.physician',
                )),
            ],
            options={
                'verbose_name': 'patient',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Medication',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, validators=[treatment.models.not_blank])),
                ('dose', models.CharField(max_length=255, validators=[treatment.models.not_blank])),
                ('frequency', models.CharField(max_length=255, validators=[treatment.models.not_blank])),
                ('patient', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE, related_name='medications', to='treatment.patient',
                )),
            ],
            options={
                'verbose_name': 'médicament',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Dose',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.CharField(max_length=32, validators=[treatment.models.not_blank])),
                ('time', models.CharField(max_length=32, validators=[treatment.models.not_blank])),
                ('administered', models.BooleanField(db_index=True, default=False)),
                ('medication', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE, related_name='doses', to='treatment.medication',
                )),
                ('patient', models.ForeignKey(
                    blank=True, null=True, on_delete=django.db.models.deletion.CASCADE,
                    related_name='doses', to='treatment.patient',
                )),
            ],
            options={
                'verbose_name': 'prise',
                'ordering': ['id'],
                'indexes': [
                    models.Index(fields=['patient', 'medication', 'administered'], name='dose_patient_med_state_idx'),
                ],
            },
        ),
    ]
