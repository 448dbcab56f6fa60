"""
Shared test fixtures for the fieldtree test suite.
"""

import pytest
from demo_scene import Camera, Light

from fieldtree import SceneObject


@pytest.fixture
def scene():
    """Root "SO1" with Camera + Light, and two children.

    SO1
      Camera, Light
      Child1 (Light)
        Grandchild (Camera)
      Child2 (no components)
    """
    root = SceneObject("SO1")
    root.add_component(Camera())
    root.add_component(Light())

    child1 = SceneObject("Child1", parent=root)
    child1.add_component(Light())
    grandchild = SceneObject("Grandchild", parent=child1)
    grandchild.add_component(Camera())

    SceneObject("Child2", parent=root)
    return root


@pytest.fixture
def lone_object():
    """Scene object with no components and no children."""
    return SceneObject("Lonely")
