"""Scene entities arranged in parent/child trees, and the manager that draws them."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, Protocol, TypeVar

from .geometry import Color, Rectangle, Vector2

__all__ = ["EntityType", "Entity", "EntityManager", "Renderer"]


class EntityType(Enum):
    """Kinds of entity; entities of one kind share a naming counter."""

    NONE = 0
    GUI_COMPONENT = 1
    GUI_WINDOW = 2
    GUI_CARD = 3
    GUI_HORIZONTAL_BOX = 4
    GUI_MINI_COVER = 5


class Texture(Protocol):
    width: int
    height: int


class Renderer(Protocol):
    """The drawing surface an entity manager draws onto."""

    def draw_texture(
        self,
        texture: Any,
        source: Rectangle,
        dest: Rectangle,
        origin: Vector2,
        rotation: float,
        color: Color,
    ) -> None: ...

    def begin_scissor(self, x: int, y: int, width: int, height: int) -> None: ...

    def end_scissor(self) -> None: ...


Hook = Callable[["Entity"], None]


class Entity:
    """A drawable node; subclasses set ``entity_type`` and override the hooks.

    Without subclassing, behaviour can be attached by appending callables
    to ``on_update``, ``on_draw`` and ``on_end``; each receives the entity.
    """

    entity_type: EntityType = EntityType.NONE

    def __init__(self) -> None:
        self.to_delete = False
        self.to_draw = True
        self.scissor_mode = False
        self.visible = True
        self.bring_to_front = False
        self._z_order = 0
        self.children: list[Entity] = []
        self.name_id = ""
        self.parent: Optional[Entity] = None

        self.x = 0
        self.y = 0
        self.width = 0
        self.height = 0
        self.source_x = 0.0
        self.source_y = 0.0
        self.scale_width = 0.0
        self.scale_height = 0.0
        self.scale = 1.0
        self.rotation = 0.0
        self.red = 255
        self.green = 255
        self.blue = 255
        self.alpha = 255
        self.root_x = 0
        self.root_y = 0

        self.texture_name = ""
        self.scissor_area = Rectangle()

        self.on_update: list[Hook] = []
        self.on_draw: list[Hook] = []
        self.on_end: list[Hook] = []

    @property
    def z_order(self) -> int:
        """Drawing order; set through the entity manager."""
        return self._z_order

    def _run_hooks(self, hooks: list[Hook]) -> None:
        for hook in list(hooks):
            hook(self)

    def update(self) -> None:
        """Per-frame logic; runs the ``on_update`` callables."""
        self._run_hooks(self.on_update)

    def draw(self) -> None:
        """Called just before the texture is drawn; runs the ``on_draw`` callables."""
        self._run_hooks(self.on_draw)

    def end(self) -> None:
        """Called when the manager shuts down; runs the ``on_end`` callables."""
        self._run_hooks(self.on_end)

    def update_position(self) -> None:
        """Propagate this entity's absolute position to its children."""
        for child in self.children:
            child.root_x = self.x + self.root_x
            child.root_y = self.y + self.root_y

    def self_delete(self) -> None:
        """Mark this entity and all of its descendants for deletion."""
        self.to_delete = True
        for child in self.children:
            child.self_delete()

    def add_child(self, child: Entity) -> None:
        """Attach a child unless it already belongs to this entity."""
        if child.parent is not self:
            child.parent = self
            self.children.append(child)

    def root_entity(self) -> Entity:
        """The top of this entity's tree."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def enable_scissor_mode(self, x: float, y: float, width: float, height: float) -> None:
        """Clip drawing to an area, narrowing any area already set, for the whole subtree."""
        area = self.scissor_area
        if self.scissor_mode:
            area.set_position(max(x, area.x), max(y, area.y))
            area.set_size(min(width, area.width), min(height, area.height))
        else:
            area.set_position(x, y)
            area.set_size(width, height)
        self.scissor_mode = True
        for child in self.children:
            child.enable_scissor_mode(area.x, area.y, area.width, area.height)

    def disable_scissor_mode(self) -> None:
        self.scissor_mode = False


E = TypeVar("E", bound=Entity)


class EntityManager:
    """Owns entities, updates them and draws them in z order."""

    def __init__(
        self,
        texture_lookup: Callable[[str], Optional[Texture]],
        renderer: Renderer,
    ) -> None:
        self._texture_lookup = texture_lookup
        self._renderer = renderer
        self._entities: list[Entity] = []
        self._type_count: list[EntityType] = []

    @property
    def entities(self) -> list[Entity]:
        return list(self._entities)

    def create_entity(self, cls: type[E], name: str, *args: Any, **kwargs: Any) -> E:
        """Create an entity of ``cls``, name it per type and put it on top."""
        if not (isinstance(cls, type) and issubclass(cls, Entity)):
            raise TypeError(f"{cls!r} is not an Entity subclass")
        entity = cls(*args, **kwargs)
        counter = self._type_count.count(entity.entity_type)
        entity.name_id = f"{counter}_{name}"
        entity._z_order = len(self._entities)
        self._entities.append(entity)
        self._type_count.append(entity.entity_type)
        return entity

    def get_entities(self, entity_type: EntityType) -> list[Entity]:
        return [e for e in self._entities if e.entity_type is entity_type]

    def set_visible_all(self, entity: Entity, visible: bool) -> None:
        """Show or hide the children of an entity."""
        for child in entity.children:
            child.visible = visible

    def set_z_order(self, entity: Entity, z_order: int) -> None:
        entity._z_order = z_order
        self._entities.sort(key=lambda e: e.z_order)

    def update_all(self) -> None:
        for entity in self._entities:
            entity.to_draw = entity.visible
            entity.update()

    def update_position_all(self) -> None:
        for entity in self._entities:
            entity.update_position()

    def draw(self) -> None:
        """Draw every entity; those brought to front are drawn last, unclipped."""
        front: list[Entity] = []
        for entity in self._entities:
            if entity.bring_to_front:
                front.append(entity)
                continue
            clipped = entity.scissor_mode
            if clipped:
                area = entity.scissor_area
                self._renderer.begin_scissor(
                    int(area.x), int(area.y), int(area.width), int(area.height)
                )
            self._draw_entity(entity)
            if clipped:
                self._renderer.end_scissor()
        for entity in front:
            self._draw_entity(entity)

    def end(self) -> None:
        for entity in self._entities:
            entity.end()

    def _draw_entity(self, entity: Entity) -> None:
        texture = self._texture_lookup(entity.texture_name)
        if texture is None or not entity.to_draw:
            return
        x = entity.x + entity.root_x
        y = entity.y + entity.root_y
        width = entity.width if entity.width > 0 else texture.width
        height = entity.height if entity.height > 0 else texture.height
        scale_width = entity.scale_width if entity.scale_width > 0 else float(width)
        scale_height = entity.scale_height if entity.scale_height > 0 else float(height)

        source = Rectangle(entity.source_x, entity.source_y, float(width), float(height))
        origin = Vector2(width / 2.0, height / 2.0)
        dest = Rectangle(
            x + origin.x,
            y + origin.y,
            scale_width * entity.scale,
            scale_height * entity.scale,
        )
        color = Color(entity.red, entity.green, entity.blue, entity.alpha)

        entity.draw()
        self._renderer.draw_texture(texture, source, dest, origin, entity.rotation, color)
        entity.to_draw = False
        entity.bring_to_front = False