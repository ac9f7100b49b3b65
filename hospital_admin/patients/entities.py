from hospital_admin.core.schema import EntityDefinition
from hospital_admin.patients.serializers import PatientWriteSerializer

PATIENTS = EntityDefinition(
    name='patients',
    label='patient',
    label_plural='patients',
    serializer_class=PatientWriteSerializer,
    search_fields=('full_name', 'phone', 'email'),
    order_field='created_at',
    ascending=False,
    list_columns=(
        ('Name', 'full_name'),
        ('Date of Birth', 'date_of_birth'),
        ('Gender', 'gender'),
        ('Phone', 'phone'),
        ('Email', 'email'),
    ),
)
