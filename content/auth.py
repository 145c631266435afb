from django.conf import settings
from django.contrib.auth.models import update_last_login
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer, TokenObtainSerializer
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.utils import datetime_from_epoch
from rest_framework_simplejwt.views import TokenObtainPairView


class RememberMeTokenObtainPairSerializer(TokenObtainPairSerializer):
    """Token pair whose refresh lifetime is the session length.

    One hour by default, a week when ``remember_me`` is set. The refresh
    expiry is returned as ``session_expiry`` so the admin client can show it.
    """

    remember_me = serializers.BooleanField(required=False, default=False)

    def validate(self, attrs):
        remember_me = attrs.pop("remember_me", False)
        # Authenticate only; the pair is minted below with our own lifetime
        data = TokenObtainSerializer.validate(self, attrs)

        refresh = self.get_token(self.user)
        lifetime = settings.EXTENDED_SESSION_DURATION if remember_me else settings.SESSION_DURATION
        refresh.set_exp(lifetime=lifetime)

        data["refresh"] = str(refresh)
        data["access"] = str(refresh.access_token)
        data["remember_me"] = remember_me
        data["session_expiry"] = datetime_from_epoch(refresh["exp"]).isoformat()

        if api_settings.UPDATE_LAST_LOGIN:
            update_last_login(None, self.user)
        return data


class RememberMeTokenObtainPairView(TokenObtainPairView):
    serializer_class = RememberMeTokenObtainPairSerializer
