from types import SimpleNamespace

import pytest

from retrolaunch.textures import StatusImage, TextureImage, TextureManager


class FakeLoader:
    def __init__(self):
        self.loaded = []
        self.unloaded = []

    def load(self, source):
        if source == "missing":
            return None
        texture = SimpleNamespace(source=source)
        self.loaded.append(texture)
        return texture

    def unload(self, texture):
        self.unloaded.append(texture)


@pytest.fixture
def loader():
    return FakeLoader()


@pytest.fixture
def manager(loader):
    return TextureManager(loader)


def test_texture_image_load_and_unload(loader):
    slot = TextureImage()
    slot.load("a.png", loader)
    assert slot.status is StatusImage.LOADED
    assert slot.texture.source == "a.png"
    first = slot.texture
    slot.load("b.png", loader)
    assert loader.unloaded == [first]
    slot.unload()
    assert slot.status is StatusImage.UNLOAD
    assert slot.texture is None


def test_texture_image_failed_load_stays_unloaded(loader):
    slot = TextureImage()
    slot.load("missing", loader)
    assert slot.status is StatusImage.UNLOAD
    assert slot.texture is None


def test_set_sprite_loads_once(manager, loader):
    manager.set_sprite("sprite", "sprite.png")
    manager.set_sprite("sprite", "other.png")
    assert manager.get_sprite("sprite").source == "sprite.png"
    assert len(loader.loaded) == 1
    assert manager.status_of("sprite") is StatusImage.LOADED


def test_unknown_sprite_is_empty_slot(manager):
    assert manager.get_sprite("nothing") is None
    assert manager.status_of("nothing") is StatusImage.UNLOAD


def test_cover_slots_created_on_access(manager):
    assert manager.get_cover(3).status is StatusImage.UNLOAD
    manager.set_cover(3, "c.png")
    manager.set_cover_mini(3, "m.png")
    assert manager.get_cover(3).texture.source == "c.png"
    assert manager.get_cover_mini(3).texture.source == "m.png"


def test_delete_sprite_waits_for_threshold(manager):
    for key in range(10):
        manager.set_cover(key, f"{key}.png")
    manager.delete_sprite([0])
    assert all(manager.get_cover(k).status is StatusImage.LOADED for k in range(10))


def test_delete_sprite_marks_out_of_range(manager):
    for key in range(65):
        manager.set_cover(key, f"{key}.png")
    keep = [0, 1, 2]
    manager.delete_sprite(keep)
    for key in range(65):
        expected = StatusImage.LOADED if key in keep else StatusImage.UNLOAD
        assert manager.get_cover(key).status is expected
    assert manager.get_cover_mini(10).status is StatusImage.UNLOAD
    assert manager.count_clear == 0


def test_marked_cover_is_reloaded(manager, loader):
    manager.set_cover(1, "old.png")
    manager.clear_covers()
    manager.set_cover(1, "new.png")
    assert manager.get_cover(1).texture.source == "new.png"
    assert [t.source for t in loader.unloaded] == ["old.png"]


def test_clear_covers_marks_all(manager):
    manager.set_cover(1, "a.png")
    manager.set_cover_mini(1, "b.png")
    manager.set_sprite("sprite", "s.png")
    manager.clear_covers()
    assert manager.get_cover(1).status is StatusImage.UNLOAD
    assert manager.get_cover_mini(1).status is StatusImage.UNLOAD
    assert manager.status_of("sprite") is StatusImage.LOADED


def test_end_play_unloads_everything(manager, loader):
    manager.set_sprite("sprite", "s.png")
    manager.set_cover(1, "c.png")
    manager.set_cover_mini(1, "m.png")
    manager.end_play()
    assert sorted(t.source for t in loader.unloaded) == ["c.png", "m.png", "s.png"]
    assert manager.sprites == {} and manager.covers == {} and manager.covers_mini == {}