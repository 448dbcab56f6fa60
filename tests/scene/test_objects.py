"""
Tests for the default in-memory scene model.
"""

import pytest
from demo_scene import Camera, Light

from fieldtree import SceneGraph, SceneObject
from fieldtree.exceptions import ObjectDestroyedError


class TestHierarchy:
    """Test parent/child bookkeeping."""

    def test_children_in_insertion_order(self, scene):
        names = [scene.get_child(i).name for i in range(scene.get_num_children())]
        assert names == ["Child1", "Child2"]

    def test_parent_link(self, scene):
        assert scene.get_child(0).parent is scene
        assert scene.parent is None

    def test_reparent_moves_child(self, scene):
        child2 = scene.get_child(1)
        child2.set_parent(scene.get_child(0))

        assert scene.get_num_children() == 1
        assert scene.get_child(0).get_num_children() == 2

    def test_cannot_parent_to_self(self, lone_object):
        with pytest.raises(ValueError):
            lone_object.set_parent(lone_object)

    def test_cannot_parent_to_descendant(self, scene):
        grandchild = scene.get_child(0).get_child(0)

        with pytest.raises(ValueError):
            scene.set_parent(grandchild)
        assert scene.parent is None
        assert grandchild.get_num_children() == 0

    def test_destroy_after_rejected_cycle(self):
        root = SceneObject("Root")
        child = SceneObject("Child", parent=root)
        with pytest.raises(ValueError):
            root.set_parent(child)

        root.destroy()
        assert child.is_destroyed


class TestComponents:
    """Test component attachment."""

    def test_components_in_attachment_order(self, scene):
        assert [type(c) for c in scene.get_components()] == [Camera, Light]

    def test_back_reference(self, lone_object):
        camera = lone_object.add_component(Camera())
        assert camera.scene_object is lone_object

    def test_get_component_by_type(self, scene):
        assert isinstance(scene.get_component(Light), Light)
        assert scene.get_child(1).get_component(Light) is None

    def test_double_attach_rejected(self, scene, lone_object):
        camera = scene.get_component(Camera)
        with pytest.raises(ValueError):
            lone_object.add_component(camera)

    def test_remove_component(self, scene):
        camera = scene.get_component(Camera)
        scene.remove_component(camera)

        assert camera.scene_object is None
        assert [type(c) for c in scene.get_components()] == [Light]

    def test_remove_matches_by_identity(self, lone_object):
        first = lone_object.add_component(Light())
        second = lone_object.add_component(Light())
        assert first == second

        lone_object.remove_component(second)

        assert len(lone_object.get_components()) == 1
        assert lone_object.get_components()[0] is first
        assert first.scene_object is lone_object
        assert second.scene_object is None

    def test_remove_unattached_rejected(self, scene):
        with pytest.raises(ValueError):
            scene.remove_component(Light())
        assert len(scene.get_components()) == 2

    def test_components_list_is_a_copy(self, scene):
        scene.get_components().clear()
        assert len(scene.get_components()) == 2


class TestDestroy:
    """Destroyed objects raise on access."""

    def test_access_after_destroy(self, scene):
        child1 = scene.get_child(0)
        grandchild = child1.get_child(0)
        child1.destroy()

        assert child1.is_destroyed
        assert grandchild.is_destroyed
        with pytest.raises(ObjectDestroyedError):
            child1.get_components()
        with pytest.raises(ObjectDestroyedError):
            _ = grandchild.name

    def test_destroy_detaches_from_parent(self, scene):
        scene.get_child(0).destroy()
        assert scene.get_num_children() == 1
        assert scene.get_child(0).name == "Child2"

    def test_destroy_twice_is_harmless(self, lone_object):
        lone_object.destroy()
        lone_object.destroy()
        assert lone_object.is_destroyed


class TestSceneGraph:
    """Test the ObjectGraph adapter over SceneObject."""

    def test_capabilities(self, scene):
        graph = SceneGraph()

        assert graph.child_count(scene) == 2
        assert graph.child_at(scene, 1).name == "Child2"
        assert [graph.display_name(c) for c in graph.list_components(scene)] == [
            "Camera",
            "Light",
        ]

    def test_display_name_of_object(self):
        assert SceneGraph().display_name(SceneObject("My Scene Object")) == (
            "My Scene Object"
        )

    def test_destroyed_object_propagates(self, lone_object):
        lone_object.destroy()
        with pytest.raises(ObjectDestroyedError):
            SceneGraph().child_count(lone_object)
