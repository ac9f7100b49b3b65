from hospital_admin.appointments.serializers import AppointmentWriteSerializer
from hospital_admin.core.schema import EntityDefinition, JoinSpec, RelationSpec

APPOINTMENTS = EntityDefinition(
    name='appointments',
    label='appointment',
    label_plural='appointments',
    serializer_class=AppointmentWriteSerializer,
    search_fields=('patients.full_name', 'doctors.full_name'),
    order_field='appointment_date',
    ascending=False,
    joins=(
        JoinSpec('patients', ('full_name',)),
        JoinSpec('doctors', ('full_name', 'specialization')),
    ),
    relations=(
        RelationSpec('patient_id', 'patients'),
        RelationSpec('doctor_id', 'doctors', label_columns=('full_name', 'specialization')),
    ),
    create_verb='book',
    create_verb_past='booked',
    list_columns=(
        ('Patient', 'patients.full_name'),
        ('Doctor', 'doctors.full_name'),
        ('Specialization', 'doctors.specialization'),
        ('Date', 'appointment_date'),
        ('Time', 'appointment_time'),
        ('Status', 'status'),
    ),
)
