import pytest

from treatment.errors import NotFound, ValidationFailure
from treatment.models import Dose, Medication, Patient, Physician
from treatment.services import records
from treatment.services.doses import add_dose, find_missed_doses, render_missed_doses, set_dose_state, update_dose
from treatment.services.dossier import build_dossier
from treatment.services.listing import patient_page, render_all_patients, render_patient_page
from treatment.services.medications import add_medication, update_medication
from treatment.services.patients import add_patient
from treatment.services.physicians import add_physician

pytestmark = pytest.mark.django_db


@pytest.fixture
def physician():
    return add_physician(name='Martin', first_name='Claire', specialty='Endocrinologie')


@pytest.fixture
def patient(physician):
    patient, _ = add_patient(name='Dupont', first_name='Jean', age=45, condition='diabète', physician_id=physician.id)
    return patient


@pytest.fixture
def insulin(patient):
    medication, _ = add_medication(name='Insuline', dose='10 UI', frequency='2 fois par jour', patient_id=patient.id)
    return medication


def test_add_patient_confirmation_names_patient_and_physician(physician):
    patient, message = add_patient(
        name='Dupont', first_name='Jean', age=45, condition='diabète', physician_id=physician.id,
    )
    assert patient.id is not None
    assert message == 'Patient Dupont Jean ajouté avec succès au médecin Martin Claire.'


@pytest.mark.parametrize('fields', [
    {'age': 0},
    {'age': 121},
    {'name': ''},
    {'first_name': '   '},
    {'condition': ''},
])
def test_invalid_patient_is_never_persisted(physician, fields):
    values = {'name': 'Dupont', 'first_name': 'Jean', 'age': 45, 'condition': 'diabète'}
    values.update(fields)
    with pytest.raises(ValidationFailure) as exc:
        add_patient(physician_id=physician.id, **values)
    assert set(exc.value.errors) == set(fields)
    assert Patient.objects.count() == 0


def test_age_bounds_are_inclusive(physician):
    for age in (1, 120):
        add_patient(name='Dupont', first_name='Jean', age=age, condition='diabète', physician_id=physician.id)
    assert Patient.objects.count() == 2


def test_add_medication_for_missing_patient_raises_not_found():
    with pytest.raises(NotFound) as exc:
        add_medication(name='Insuline', dose='10 UI', frequency='1 fois par jour', patient_id=999)
    assert exc.value.pk == 999
    assert '999' in exc.value.message
    assert Medication.objects.count() == 0


def test_add_dose_for_missing_medication_raises_not_found(insulin):
    add_dose(time='08:00', date='2024-03-01', medication_id=insulin.id)
    with pytest.raises(NotFound):
        add_dose(time='08:00', date='2024-03-01', medication_id=999)
    assert Dose.objects.count() == 1


def test_set_dose_state_round_trip(insulin):
    dose, _ = add_dose(time='08:00', date='2024-03-01', medication_id=insulin.id)
    assert dose.administered is False
    for state in (True, True, False, True, False):
        _, message = set_dose_state(dose.id, state)
        assert records.fetch_by_id('dose', dose.id).administered is state
    assert message == (
        "La prise du 2024-03-01 à 08:00 du patient 'Dupont Jean' pour le médicament "
        "'Insuline' a été marquée comme non effectuée."
    )


def test_set_dose_state_loads_dose_with_medication_and_patient(insulin, django_assert_max_num_queries):
    dose, _ = add_dose(time='08:00', date='2024-03-01', medication_id=insulin.id)
    # one joined fetch and one update
    with django_assert_max_num_queries(2):
        set_dose_state(dose.id, True)


def test_set_dose_state_of_missing_dose_raises_not_found():
    with pytest.raises(NotFound):
        set_dose_state(42, True)


def test_dossier_renders_identity_medications_and_counts(patient, insulin):
    first, _ = add_dose(time='08:00', date='2024-03-01', medication_id=insulin.id)
    add_dose(time='20:00', date='2024-03-01', medication_id=insulin.id)
    set_dose_state(first.id, True)

    dossier = build_dossier(patient.id)
    assert (dossier.total, dossier.administered, dossier.not_administered) == (2, 1, 1)
    assert dossier.render() == (
        'Dossier du patient :\n'
        'Nom : Dupont\n'
        'Prénom : Jean\n'
        'Maladie : diabète\n'
        'Âge : 45\n'
        'Médicaments :\n'
        '- Insuline (10 UI, 2 fois par jour)\n'
        'Prises enregistrées : 2\n'
        'Effectuées : 1\n'
        'Oubliées : 1'
    )


def test_dossier_counts_are_conserved_as_doses_change(patient, insulin):
    doses = [add_dose(time=f'{h:02d}:00', date='2024-03-01', medication_id=insulin.id)[0] for h in range(6)]
    for step, dose in enumerate(doses):
        set_dose_state(dose.id, step % 2 == 0)
        dossier = build_dossier(patient.id)
        assert dossier.administered + dossier.not_administered == dossier.total == len(doses)
    records.delete_by_id('dose', doses[0].id)
    dossier = build_dossier(patient.id)
    assert dossier.administered + dossier.not_administered == dossier.total == len(doses) - 1


def test_dossier_without_medication(patient):
    report = build_dossier(patient.id).render()
    assert 'Aucun médicament enregistré.' in report
    assert 'Prises enregistrées : 0' in report


def test_dossier_of_missing_patient_raises_not_found():
    with pytest.raises(NotFound):
        build_dossier(7)


def test_missed_doses_match_all_three_conditions(physician, patient, insulin):
    other_med, _ = add_medication(name='Metformine', dose='500 mg', frequency='3 fois par jour', patient_id=patient.id)
    other_patient, _ = add_patient(name='Durand', first_name='Marie', age=60, condition='diabète',
                                   physician_id=physician.id)
    foreign_med, _ = add_medication(name='Insuline', dose='8 UI', frequency='1 fois par jour',
                                    patient_id=other_patient.id)

    late, _ = add_dose(time='20:00', date='2024-03-02', medication_id=insulin.id)
    early, _ = add_dose(time='08:00', date='2024-03-01', medication_id=insulin.id)
    taken, _ = add_dose(time='12:00', date='2024-03-01', medication_id=insulin.id)
    set_dose_state(taken.id, True)
    add_dose(time='08:00', date='2024-03-01', medication_id=other_med.id)
    add_dose(time='08:00', date='2024-03-01', medication_id=foreign_med.id)

    found_patient, missed = find_missed_doses(patient.id, insulin.id)
    assert found_patient == patient
    # storage order, not chronological
    assert [d.id for d in missed] == [late.id, early.id]
    assert render_missed_doses(found_patient, missed) == (
        'Le patient Dupont Jean a oublié 2 prise(s) du médicament Insuline.\n'
        '\n'
        'Détails des prises oubliées :\n'
        '- Date : 2024-03-02, Heure : 20:00\n'
        '- Date : 2024-03-01, Heure : 08:00\n'
    )


def test_missed_doses_empty_and_unknown_medication(patient, insulin):
    dose, _ = add_dose(time='08:00', date='2024-03-01', medication_id=insulin.id)
    set_dose_state(dose.id, True)
    for medication_id in (insulin.id, 999):
        found_patient, missed = find_missed_doses(patient.id, medication_id)
        assert missed == []
        assert render_missed_doses(found_patient, missed) == (
            "Le patient Dupont Jean n'a oublié aucune prise pour ce médicament."
        )


def test_missed_doses_for_missing_patient_raises_not_found(insulin):
    with pytest.raises(NotFound):
        find_missed_doses(999, insulin.id)


def test_dose_keeps_original_patient_after_medication_reassignment(physician, patient, insulin):
    dose, _ = add_dose(time='08:00', date='2024-03-01', medication_id=insulin.id)
    other, _ = add_patient(name='Durand', first_name='Marie', age=60, condition='diabète', physician_id=physician.id)

    update_medication(insulin.id, name='Insuline', dose='10 UI', frequency='2 fois par jour', patient_id=other.id)

    assert records.fetch_by_id('dose', dose.id).patient_id == patient.id
    assert build_dossier(patient.id).total == 1
    assert build_dossier(other.id).total == 0
    assert [m.name for m in build_dossier(other.id).medications] == ['Insuline']


def test_update_dose_replaces_every_field(patient, insulin):
    dose, _ = add_dose(time='08:00', date='2024-03-01', medication_id=insulin.id)
    updated = update_dose(dose.id, date='2024-03-05', time='09:30', administered=True, medication_id=insulin.id)
    assert (updated.date, updated.time, updated.administered) == ('2024-03-05', '09:30', True)
    assert updated.patient_id is None


def test_update_rejects_invalid_values_without_saving(patient, insulin):
    with pytest.raises(ValidationFailure):
        update_medication(insulin.id, name='', dose='10 UI', frequency='2 fois par jour', patient_id=patient.id)
    assert Medication.objects.get(id=insulin.id).name == 'Insuline'


def test_failed_update_leaves_instance_unchanged(patient):
    with pytest.raises(ValidationFailure):
        records.replace(patient, name='Durand', age=0)
    assert (patient.name, patient.age) == ('Dupont', 45)
    assert Patient.objects.get(id=patient.id).name == 'Dupont'


def test_delete_patient_closes_over_medications_and_doses(patient, insulin):
    add_dose(time='08:00', date='2024-03-01', medication_id=insulin.id)
    add_dose(time='20:00', date='2024-03-01', medication_id=insulin.id)

    removed = records.delete_by_id('patient', patient.id)

    assert removed == 4
    assert Medication.objects.filter(patient_id=patient.id).count() + Dose.objects.filter(
        medication_id=insulin.id).count() == 0


def test_delete_physician_removes_supervised_patients(physician, patient, insulin):
    add_dose(time='08:00', date='2024-03-01', medication_id=insulin.id)
    records.delete_by_id('physician', physician.id)
    assert Patient.objects.count() == Medication.objects.count() == Dose.objects.count() == 0


def test_delete_missing_record_is_a_no_op():
    assert records.delete_by_id('dose', 123) == 0


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError):
        records.fetch_by_id('nurse', 1)


def _add_patients(physician, *rows):
    return [
        add_patient(name=name, first_name=first, age=age, condition='asthme', physician_id=physician.id)[0]
        for name, first, age in rows
    ]


def test_patient_page_sorts_and_renders(physician):
    leroy, dupont, moreau = _add_patients(
        physician, ('Leroy', 'Paul', 30), ('Dupont', 'Jean', 70), ('Moreau', 'Julie', 50),
    )
    add_medication(name='Ventoline', dose='2 bouffées', frequency='si besoin', patient_id=leroy.id)

    result = patient_page(page=0, size=2, sort_by='name')
    assert [p.name for p in result.patients] == ['Dupont', 'Leroy']
    assert (result.total, result.total_pages) == (3, 2)
    assert render_patient_page(result) == (
        'Page 1/2\n'
        'Nombre total de patients : 3\n'
        'Taille de page : 2\n'
        '\n'
        'Patient : Dupont Jean\n'
        'Âge : 70\n'
        'Maladie : asthme\n'
        'Aucun médicament enregistré.\n'
        '\n'
        '-----------------------------\n'
        '\n'
        'Patient : Leroy Paul\n'
        'Âge : 30\n'
        'Maladie : asthme\n'
        'Médicaments :\n'
        '- Ventoline (2 bouffées, si besoin)\n'
        '\n'
        '-----------------------------\n'
    )

    second = patient_page(page=1, size=2, sort_by='name')
    assert [p.name for p in second.patients] == ['Moreau']
    assert render_patient_page(second).startswith('Page 2/2\n')

    assert [p.name for p in patient_page(page=0, size=5, sort_by='-age').patients] == ['Dupont', 'Moreau', 'Leroy']


def test_patient_page_uses_configured_defaults(settings, physician):
    settings.MEDTRACK_PAGE_SIZE = 2
    settings.MEDTRACK_SORT_BY = 'age'
    _add_patients(physician, ('Leroy', 'Paul', 30), ('Dupont', 'Jean', 70), ('Moreau', 'Julie', 50))
    result = patient_page()
    assert result.size == 2
    assert [p.age for p in result.patients] == [30, 50]


@pytest.mark.parametrize('page,sort_by', [
    (5, 'name'), (-1, 'name'), (10 ** 20, 'name'), (0, 'shoe_size'), (0, '--name'), (0, '-'),
])
def test_patient_page_out_of_range_or_unknown_sort_is_empty(physician, page, sort_by):
    _add_patients(physician, ('Leroy', 'Paul', 30))
    result = patient_page(page=page, size=5, sort_by=sort_by)
    assert result.is_empty
    assert render_patient_page(result) == 'Aucun patient à afficher dans cette page.'


def test_patient_page_rejects_non_positive_size():
    with pytest.raises(ValidationFailure):
        patient_page(page=0, size=0)


def test_render_all_patients():
    assert render_all_patients() == 'Aucun patient trouvé dans la base de données.'
    physician = add_physician(name='Petit', first_name='Sophie', specialty='Pneumologie')
    _add_patients(physician, ('Leroy', 'Paul', 30))
    assert render_all_patients().startswith('Liste des patients enregistrés :\nPatient : Leroy Paul\n')
