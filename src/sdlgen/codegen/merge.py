"""
Merging of interface fields and type extensions into the flat item list.

The merge is a single pass in list order. An item only sees the state its
predecessors left behind, so an interface field injected into a base type
after an extension was folded into it is not propagated back to that
extension.
"""

from sdlgen import log
from sdlgen.model import ItemKind, TypeField, TypeItem


def find_interface(items: list[TypeItem], name: str) -> TypeItem | None:
    return next((item for item in items if item.kind == ItemKind.INTERFACE and item.name == name), None)


def find_base_item(items: list[TypeItem], extension: TypeItem) -> TypeItem | None:
    """Return the first item sharing the extension's name with a different kind."""
    for item in items:
        if item is not extension and item.name == extension.name and item.kind != extension.kind:
            return item
    return None


def append_missing_fields(target: TypeItem, fields: list[TypeField]) -> int:
    """
    Append the fields whose names are not present on the target yet.

    Presence is checked per field, so a name repeated in `fields` is only added once.

    Returns:
        int: Number of fields appended
    """
    appended = 0
    for field in fields:
        if not target.has_field(field.name):
            target.fields.append(field)
            appended += 1
    return appended


def inject_interface_fields(items: list[TypeItem], item: TypeItem) -> None:
    for interface_name in item.implemented_interfaces:
        interface = find_interface(items, interface_name)
        if interface is None:
            log.debug(f"Interface {interface_name} implemented by {item.name} is not declared")
            continue
        appended = append_missing_fields(item, interface.fields)
        log.debug(f"Injected {appended} field(s) from {interface_name} into {item.name}")


def fold_extension(items: list[TypeItem], extension: TypeItem) -> None:
    base = find_base_item(items, extension)

    if extension.implemented_interfaces and base is not None:
        base.implemented_interfaces.extend(extension.implemented_interfaces)

    if base is None:
        extension.kind = ItemKind.OBJECT
        log.debug(f"Extension of {extension.name} has no base, promoted to object")
        return

    appended = append_missing_fields(base, extension.fields)
    for tag in extension.tags:
        base.add_tag(tag)
    log.debug(f"Folded extension of {extension.name} into its base ({appended} new field(s))")


def resolve_items(items: list[TypeItem]) -> list[TypeItem]:
    """
    Inject inherited interface fields and fold extensions into their base items.

    Args:
        items: Items in document order, as produced by the document visitor. Mutated in place.

    Returns:
        list[TypeItem]: The same list
    """
    for item in items:
        if item.kind == ItemKind.OBJECT and item.implemented_interfaces:
            inject_interface_fields(items, item)
        elif item.kind == ItemKind.EXTENSION:
            if item.implemented_interfaces:
                inject_interface_fields(items, item)
            fold_extension(items, item)

    log.info(f"Resolved {len(items)} items")
    return items
