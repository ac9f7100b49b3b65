from rest_framework import serializers

from hospital_admin.core.schema import EntitySerializer

STATUS_CHOICES = [
    ('scheduled', 'Scheduled'),
    ('completed', 'Completed'),
    ('cancelled', 'Cancelled'),
]


class AppointmentWriteSerializer(EntitySerializer):
    """Editable appointment fields (create/update payload).

    patient_id/doctor_id are data service ids; whether they exist is checked
    by the data service, not here. The joined patient/doctor names are
    read-only and never part of this payload.
    """

    patient_id = serializers.CharField()
    doctor_id = serializers.CharField()
    appointment_date = serializers.DateField()
    appointment_time = serializers.TimeField()
    status = serializers.ChoiceField(choices=STATUS_CHOICES, initial='scheduled')
    reason = serializers.CharField(required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True)
