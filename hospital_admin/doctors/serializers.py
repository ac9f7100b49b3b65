from decimal import Decimal

from rest_framework import serializers

from hospital_admin.core.schema import EntitySerializer


class DoctorWriteSerializer(EntitySerializer):
    """Editable doctor fields (create/update payload).

    ``experience_years`` arrives as form text and is coerced to an integer;
    a blank ``consultation_fee`` is stored as null.
    """

    full_name = serializers.CharField(max_length=255)
    specialization = serializers.CharField(max_length=255)
    phone = serializers.CharField(max_length=50)
    email = serializers.EmailField()
    qualification = serializers.CharField(max_length=255)
    experience_years = serializers.IntegerField(min_value=0, initial=0)
    consultation_fee = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0'),
        required=False,
        allow_null=True,
    )
