from dataclasses import fields

from ..decorator import DataclassMetaGetoptPlugin
from ..errors import InvalidOptionValue


class ValidateTypes(DataclassMetaGetoptPlugin):
    """
    Checks every parsed field value against the field's annotation. Requires extra [type_validation].
    """

    def post_parse(self) -> None:
        super().post_parse()
        self.validate_types()

    def validate_types(self) -> None:
        try:
            from trycast import isassignable
        except ImportError:
            raise NotImplementedError(f'Plugin {__class__} requires extra [type_validation]! (Not installed)')

        for field in fields(self):  # type: ignore[arg-type]
            field_val = getattr(self, field.name)
            if not isassignable(field_val, field.type):
                raise InvalidOptionValue(f'{field.name} {field_val!r} should be a {field.type}!', field.name)
