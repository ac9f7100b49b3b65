from hospital_admin.core.schema import EntityDefinition
from hospital_admin.doctors.serializers import DoctorWriteSerializer

DOCTORS = EntityDefinition(
    name='doctors',
    label='doctor',
    label_plural='doctors',
    serializer_class=DoctorWriteSerializer,
    search_fields=('full_name', 'specialization', 'email'),
    order_field='created_at',
    ascending=False,
    list_columns=(
        ('Name', 'full_name'),
        ('Specialization', 'specialization'),
        ('Qualification', 'qualification'),
        ('Experience (years)', 'experience_years'),
        ('Phone', 'phone'),
    ),
)
