"""DRF authentication using the data service access token."""

from dataclasses import dataclass

from rest_framework.authentication import BaseAuthentication, get_authorization_header


@dataclass(frozen=True)
class DataServiceUser:
    """Caller identified only by a data service token.

    The token is not verified here; the data service rejects invalid
    tokens on the first request that uses them.
    """

    token: str

    @property
    def is_authenticated(self) -> bool:
        return True


class DataServiceTokenAuthentication(BaseAuthentication):
    keyword = 'Bearer'

    def authenticate(self, request):
        auth = get_authorization_header(request).split()
        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None
        if len(auth) != 2:
            return None

        token = auth[1].decode('latin-1')
        return DataServiceUser(token), token

    def authenticate_header(self, request):
        return self.keyword
