from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    flat_number = serializers.CharField(source='flat_id', read_only=True, allow_null=True)

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'role',
            'flat_number',
            'contact',
            'is_active',
            'created_at',
            'last_login',
        ]
        read_only_fields = ['id', 'role', 'flat_number', 'is_active', 'created_at', 'last_login']


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for resident registration."""

    username = serializers.CharField(max_length=150, required=True)
    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )
    flat_number = serializers.CharField(max_length=20, required=True)
    contact = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')

    def validate_flat_number(self, value):
        return value.strip()

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for login with username or email."""

    username = serializers.CharField(required=True, help_text="Username or email")
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )
