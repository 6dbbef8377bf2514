# authentication.py
import logging

from rest_framework import authentication, exceptions
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.models import TokenUser
from rest_framework_simplejwt.tokens import AccessToken

from .models import Admin

logger = logging.getLogger(__name__)

TOKEN_COOKIE_NAME = 'token'


def get_token_from_request(request):
    """Bearer header first, then the ``token`` cookie"""
    header = request.META.get('HTTP_AUTHORIZATION', '')
    if header.startswith('Bearer '):
        token = header[len('Bearer '):].strip()
        if token:
            return token
    return request.COOKIES.get(TOKEN_COOKIE_NAME) or None


def decode_token(raw_token):
    """Signature and expiry check; returns None for anything unusable"""
    try:
        return AccessToken(raw_token)
    except TokenError:
        return None


def generate_token(admin):
    token = AccessToken.for_user(admin)
    token['username'] = admin.username
    token['role'] = admin.role
    return str(token)


class TokenAuthentication(authentication.BaseAuthentication):
    """
    Resolves the request's admin from a JWT.

    A missing or unusable token yields an anonymous request; whether that
    is acceptable is decided by the view's permission classes. A valid
    token for an admin that no longer exists always fails.
    """

    def authenticate(self, request):
        raw_token = get_token_from_request(request)
        if raw_token is None:
            return None

        token = decode_token(raw_token)
        if token is None:
            return None

        admin = Admin.objects.filter(pk=token.get('user_id')).first()
        if admin is None:
            logger.warning(f"Token for missing admin id={token.get('user_id')}")
            raise exceptions.AuthenticationFailed('User not found')

        return admin, token

    def authenticate_header(self, request):
        return 'Bearer realm="api"'


class OptionalTokenAuthentication(TokenAuthentication):
    """Stateless variant for read-only parent routes: never fails, no lookup"""

    def authenticate(self, request):
        raw_token = get_token_from_request(request)
        if raw_token is None:
            return None

        token = decode_token(raw_token)
        if token is None:
            return None

        return TokenUser(token), token
