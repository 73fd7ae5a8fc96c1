import uuid

from dataclasses import dataclass, field

from mcauth.core.error import BadResponse


@dataclass(frozen=True)
class ProfileProperty:
    """A signed profile property, e.g. the base64 ``textures`` blob carrying skin and cape URLs."""

    name: str
    value: str
    signature: str | None = None

    @classmethod
    def from_json(cls, data: dict):
        try:
            return cls(data['name'], data['value'], data.get('signature'))
        except (KeyError, TypeError, AttributeError) as e:
            raise BadResponse(f'Malformed profile property! { data !r}') from e


@dataclass(frozen=True)
class Profile:
    """A Mojang game profile."""

    # Undashed hex, as Mojang sends it
    id: str
    name: str
    properties: tuple[ProfileProperty, ...] = field(default_factory=tuple)

    @property
    def uuid(self):
        return uuid.UUID(hex=self.id)

    def get_property(self, name: str):
        return next((p for p in self.properties if p.name == name), None)

    @classmethod
    def from_json(cls, data: dict):
        try:
            profile = cls(
                data['id'],
                data['name'],
                tuple(ProfileProperty.from_json(p) for p in data.get('properties', ()))
            )

            # Reject ids that are not UUIDs
            profile.uuid
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise BadResponse(f'Malformed profile! { data !r}') from e

        return profile


@dataclass(frozen=True)
class LoginResult:
    """Tokens and profile handed back by a successful client login."""

    access_token: str
    client_token: str
    selected_profile: Profile | None = None

    @classmethod
    def from_json(cls, data: dict):
        try:
            selected = data.get('selectedProfile')

            return cls(
                data['accessToken'],
                data['clientToken'],
                None if selected is None else Profile.from_json(selected)
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise BadResponse(f'Malformed login response! { data !r}') from e
