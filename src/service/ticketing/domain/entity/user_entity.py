import attrs

from src.service.ticketing.domain.validators import StringValidators


@attrs.define
class User:
    id: int
    username: str = attrs.field(validator=StringValidators.required_text)
    # Plain text, compared as-is by the login flow
    password: str = attrs.field(validator=StringValidators.required_text, repr=False)

    def check_password(self, password: str) -> bool:
        return self.password == password
