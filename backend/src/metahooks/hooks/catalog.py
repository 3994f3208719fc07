"""Lifecycle hook catalog.

Static, read-only table of every known hook type. Registration and
dispatch consult this table instead of special-casing hook names, so
adding a lifecycle point is a data change.

Hook types missing from the catalog are still usable: they behave as
asynchronous, unrestricted and alias-free.
"""

from types import MappingProxyType

from metahooks.hooks.types import HookDescriptor


def _descriptors(*descriptors: HookDescriptor) -> MappingProxyType:
    return MappingProxyType({d.name: d for d in descriptors})


HOOK_TYPES: "MappingProxyType[str, HookDescriptor]" = _descriptors(
    HookDescriptor("beforeValidate", 2),
    HookDescriptor("afterValidate", 2),
    HookDescriptor("validationFailed", 3),
    HookDescriptor("beforeCreate", 2),
    HookDescriptor("afterCreate", 2),
    HookDescriptor("beforeDestroy", 2),
    HookDescriptor("afterDestroy", 2),
    HookDescriptor("beforeRestore", 2),
    HookDescriptor("afterRestore", 2),
    HookDescriptor("beforeUpdate", 2),
    HookDescriptor("afterUpdate", 2),
    HookDescriptor("beforeSave", 2, alias_of=("beforeUpdate", "beforeCreate")),
    HookDescriptor("afterSave", 2, alias_of=("afterUpdate", "afterCreate")),
    HookDescriptor("beforeUpsert", 2),
    HookDescriptor("afterUpsert", 2),
    HookDescriptor("beforeBulkCreate", 2),
    HookDescriptor("afterBulkCreate", 2),
    HookDescriptor("beforeBulkDestroy", 1),
    HookDescriptor("afterBulkDestroy", 1),
    HookDescriptor("beforeBulkRestore", 1),
    HookDescriptor("afterBulkRestore", 1),
    HookDescriptor("beforeBulkUpdate", 1),
    HookDescriptor("afterBulkUpdate", 1),
    HookDescriptor("beforeFind", 1),
    HookDescriptor("beforeFindAfterExpandIncludeAll", 1),
    HookDescriptor("beforeFindAfterOptions", 1),
    HookDescriptor("afterFind", 2),
    HookDescriptor("beforeCount", 1),
    HookDescriptor("beforeDefine", 2, synchronous=True, host_restricted=True),
    HookDescriptor("afterDefine", 1, synchronous=True, host_restricted=True),
    HookDescriptor("beforeInit", 2, synchronous=True, host_restricted=True),
    HookDescriptor("afterInit", 1, synchronous=True, host_restricted=True),
    HookDescriptor("beforeAssociate", 2, synchronous=True),
    HookDescriptor("afterAssociate", 2, synchronous=True),
    HookDescriptor("beforeConnect", 1, host_restricted=True),
    HookDescriptor("afterConnect", 2, host_restricted=True),
    HookDescriptor("beforeSync", 1),
    HookDescriptor("afterSync", 1),
    HookDescriptor("beforeBulkSync", 1, host_restricted=True),
    HookDescriptor("afterBulkSync", 1, host_restricted=True),
)


def get_descriptor(hook_type: str) -> HookDescriptor | None:
    """Look up a hook type. Returns None for types not in the catalog."""
    return HOOK_TYPES.get(hook_type)


def is_synchronous(hook_type: str | None) -> bool:
    descriptor = HOOK_TYPES.get(hook_type) if hook_type else None
    return descriptor is not None and descriptor.synchronous


def is_host_restricted(hook_type: str) -> bool:
    descriptor = HOOK_TYPES.get(hook_type)
    return descriptor is not None and descriptor.host_restricted


def proxied_hook_types(hook_type: str) -> list[str]:
    """Return the hook types a registration under `hook_type` writes to.

    Aliases come first, followed by the hook type itself:
        proxied_hook_types("beforeSave") -> ["beforeUpdate", "beforeCreate", "beforeSave"]
    """
    descriptor = HOOK_TYPES.get(hook_type)
    if descriptor is None or not descriptor.alias_of:
        return [hook_type]
    return [*descriptor.alias_of, hook_type]


def list_hook_types() -> list[str]:
    """List all catalog hook types in declaration order."""
    return list(HOOK_TYPES)
