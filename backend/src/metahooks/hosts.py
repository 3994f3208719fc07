"""In-memory reference hosts for the hook system.

Registry is a global host that defines models; each Model subclass is a
record-scoped host whose parent is the registry that defined it, so
registry-level hooks apply to every model:

    registry = Registry(hooks={"beforeCreate": stamp_created_at})
    Contact = registry.define("Contact", {"name": {"required": True}})
    Contact.add_hook("afterCreate", notify)
    contact = await Contact.create(name="Ada")

Records live in a per-model dict; there is no persistence.
"""

import logging
from typing import Any

from metahooks.hooks import apply_to

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """A record failed attribute validation."""

    def __init__(self, model_name: str, errors: list[str]):
        self.model_name = model_name
        self.errors = errors
        super().__init__(f"{model_name} validation failed: {'; '.join(errors)}")


@apply_to
class Registry:
    """Global host: owns registry-wide hooks and the models it defines."""

    parent = None

    def __init__(self, hooks: dict[str, Any] | None = None):
        self.models: dict[str, type[Model]] = {}
        self._setup_hooks(hooks)

    def define(
        self,
        model_name: str,
        attributes: dict[str, dict[str, Any]] | None = None,
        hooks: dict[str, Any] | None = None,
        primary_key: str = "id",
    ) -> "type[Model]":
        """Define a model bound to this registry.

        beforeDefine hooks receive (attributes, options) and may modify
        either before the model class is built; afterDefine hooks receive
        the new model class.
        """
        attributes = dict(attributes or {})
        options: dict[str, Any] = {"hooks": dict(hooks or {}), "primary_key": primary_key}
        self.run_hooks("beforeDefine", attributes, options)

        model = type(
            model_name,
            (Model,),
            {
                "attributes": attributes,
                "primary_key": options["primary_key"],
                "parent": self,
                "_records": {},
            },
        )
        model._setup_hooks(options["hooks"])
        self.models[model_name] = model

        self.run_hooks("afterDefine", model)
        return model

    async def sync(self, **options: Any) -> None:
        """Run the bulk sync hooks around syncing every defined model."""
        await self.run_hooks("beforeBulkSync", options)
        for model in self.models.values():
            await model.sync(**options)
        await self.run_hooks("afterBulkSync", options)


@apply_to(class_level=True)
class Model:
    """Record-scoped host. Subclasses are created by Registry.define()."""

    parent: Registry | None = None
    attributes: dict[str, dict[str, Any]] = {}
    primary_key = "id"
    _records: dict[Any, "Model"] = {}

    def __init__(self, **values: Any):
        self.values = dict(values)
        self.is_new_record = True

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.values!r}>"

    @property
    def pk(self) -> Any:
        return self.values.get(self.primary_key)

    def validate(self) -> list[str]:
        """Return error messages for missing required attributes."""
        errors = []
        for attr_name, rules in self.attributes.items():
            if rules.get("required") and self.values.get(attr_name) is None:
                errors.append(f"{attr_name} is required")
        return errors

    @classmethod
    def _next_pk(cls) -> int:
        """One past the highest integer key in use, so keys are never reused while live."""
        return max((pk for pk in cls._records if isinstance(pk, int)), default=0) + 1

    @classmethod
    async def create(cls, **values: Any) -> "Model":
        instance = cls(**values)
        await instance.save()
        return instance

    async def save(self, **options: Any) -> "Model":
        """Validate and store the record, running the lifecycle hooks.

        Raises:
            ValidationError: If validation fails (after validationFailed hooks ran)
        """
        model = type(self)

        await model.run_hooks("beforeValidate", self, options)
        errors = self.validate()
        if errors:
            error = ValidationError(model.__name__, errors)
            await model.run_hooks("validationFailed", self, options, error)
            raise error
        await model.run_hooks("afterValidate", self, options)

        if self.is_new_record:
            await model.run_hooks("beforeCreate", self, options)
            if self.pk is None:
                self.values[self.primary_key] = model._next_pk()
            model._records[self.pk] = self
            self.is_new_record = False
            await model.run_hooks("afterCreate", self, options)
        else:
            await model.run_hooks("beforeUpdate", self, options)
            model._records[self.pk] = self
            await model.run_hooks("afterUpdate", self, options)

        logger.debug("saved %s %s", model.__name__, self.pk)
        return self

    async def destroy(self, **options: Any) -> None:
        model = type(self)
        await model.run_hooks("beforeDestroy", self, options)
        model._records.pop(self.pk, None)
        await model.run_hooks("afterDestroy", self, options)

    @classmethod
    async def find_all(cls, **where: Any) -> list["Model"]:
        """Return records whose values match every `where` item.

        beforeFind hooks receive the options dict and may rewrite its
        "where" entry; afterFind hooks receive (results, options).
        """
        options: dict[str, Any] = {"where": where}
        await cls.run_hooks("beforeFind", options)
        results = [
            record
            for record in cls._records.values()
            if all(record.values.get(k) == v for k, v in options["where"].items())
        ]
        await cls.run_hooks("afterFind", results, options)
        return results

    @classmethod
    async def sync(cls, **options: Any) -> None:
        await cls.run_hooks("beforeSync", options)
        await cls.run_hooks("afterSync", options)
