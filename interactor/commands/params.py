from __future__ import annotations
from interactor.discord import ApplicationCommandInteractionDataOption, ApplicationCommandOption, ApplicationCommandOptionType, Interaction, Resolved
from interactor.errors import FatalDispatchInconsistency, OptionCoercionError, UnsupportedTypeError
from .introspect import annotation_members
from .converters import convert_option
from .options import ChoiceMap, compile_field
from pydantic import BaseModel, ValidationError
from collections.abc import Sequence
from pydantic.fields import FieldInfo
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


__all__ = (
    'Embedded',
    'OptionBinding',
    'ParamGenerator',
    'compile_params',
)


class Embedded:
    """Marks a nested parameter model whose fields are promoted into the parent.

    `common: Annotated[CommonParams, Embedded]` never becomes an option itself,
    the fields of `CommonParams` are compiled in its place.
    """


@dataclass(frozen=True, slots=True)
class OptionBinding:
    name: str
    field: str
    path: tuple[str, ...]
    type: ApplicationCommandOptionType
    targets: frozenset[Any]

    def assign(self, data: dict[str, Any], value: Any) -> None: # noqa: ANN401
        for key in self.path[:-1]:
            data = data.setdefault(key, {})

        data[self.path[-1]] = value


class ParamGenerator:
    def __init__(
        self,
        model: type[BaseModel],
        bindings: Sequence[OptionBinding],
        embedded: Sequence[tuple[str, ...]] = ()
    ) -> None:
        self.model = model
        self.bindings = MappingProxyType({
            binding.name: binding
            for binding in bindings
        })
        self.embedded = tuple(embedded)

    def __repr__(self) -> str:
        return f'<ParamGenerator {self.model.__name__} options={list(self.bindings)}>'

    def __call__(
        self,
        interaction: Interaction,
        options: Sequence[ApplicationCommandInteractionDataOption]
    ) -> BaseModel:
        return self.extract(options, interaction.resolved)

    def _option_for(self, loc: tuple[int | str, ...]) -> str:
        for binding in self.bindings.values():
            if loc[:len(binding.path)] == binding.path:
                return binding.name

        return '.'.join(map(str, loc)) or self.model.__name__

    def extract(
        self,
        options: Sequence[ApplicationCommandInteractionDataOption],
        resolved: Resolved
    ) -> BaseModel:
        data: dict[str, Any] = {}

        for path in self.embedded:
            target = data
            for key in path:
                target = target.setdefault(key, {})

        for option in options:
            binding = self.bindings.get(option.name)

            if binding is None:
                raise FatalDispatchInconsistency(
                    f'received option `{option.name}` which was never compiled '
                    f'into {self.model.__name__}')

            binding.assign(data, convert_option(binding, option, resolved))

        try:
            return self.model.model_validate(data)
        except ValidationError as e:
            error = e.errors()[0]
            raise OptionCoercionError(
                self._option_for(tuple(error['loc'])),
                error['msg']
            ) from e


def _is_embedded(field: FieldInfo) -> bool:
    return any(
        metadata is Embedded or isinstance(metadata, Embedded)
        for metadata in field.metadata
    )


def _data_key(name: str, field: FieldInfo) -> str:
    return field.alias or name


_FieldEntry = tuple[str, tuple[str, ...], FieldInfo | None]


def _walk_fields(
    model: type[BaseModel],
    path: tuple[str, ...] = ()
) -> list[_FieldEntry]:
    entries: list[_FieldEntry] = []

    for name, field in model.model_fields.items():
        field_path = (*path, _data_key(name, field))

        if not _is_embedded(field):
            entries.append((name, field_path, field))
            continue

        members = annotation_members(field.annotation)
        nested = next(iter(members)) if len(members) == 1 else None

        if not (isinstance(nested, type) and issubclass(nested, BaseModel)):
            raise UnsupportedTypeError(field.annotation, name)

        entries.append((name, field_path, None))
        entries.extend(_walk_fields(nested, field_path))

    return entries


def _visible_fields(model: type[BaseModel]) -> list[_FieldEntry]:
    """Walk the fields of `model` in declaration order.

    Embedded fields are yielded with a `None` field info, immediately followed
    by their promoted fields. A name resolves to its shallowest field; when
    more than one field carries the name at that depth, none of them is
    visible.
    """
    entries = _walk_fields(model)
    depths: dict[str, list[int]] = {}

    for name, path, field in entries:
        if field is not None:
            depths.setdefault(name, []).append(len(path))

    visible: list[_FieldEntry] = []

    for name, path, field in entries:
        if field is None:
            visible.append((name, path, field))
            continue

        shallowest = min(depths[name])

        # ? ambiguous at its shallowest depth, hidden entirely
        if len(path) == shallowest and depths[name].count(shallowest) == 1:
            visible.append((name, path, field))

    return visible


def compile_params(
    param_type: type[BaseModel] | None,
    choices: ChoiceMap | None = None
) -> tuple[list[ApplicationCommandOption], ParamGenerator | None]:
    if param_type is None:
        return [], None

    if not (isinstance(param_type, type) and issubclass(param_type, BaseModel)):
        raise UnsupportedTypeError(param_type)

    options: list[ApplicationCommandOption] = []
    bindings: list[OptionBinding] = []
    embedded: list[tuple[str, ...]] = []

    for name, path, field in _visible_fields(param_type):
        if field is None:
            embedded.append(path)
            continue

        option = compile_field(name, field, choices)

        options.append(option)
        bindings.append(OptionBinding(
            name=option.name,
            field=name,
            path=path,
            type=option.type,
            targets=annotation_members(field.annotation)
        ))

    return options, ParamGenerator(param_type, bindings, embedded)
