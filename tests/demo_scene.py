"""
Demo component types shared by the fieldtree test suite.
"""

from fieldtree import (
    Color,
    Component,
    Serializable,
    Vector2,
    Vector3,
    Vector4,
    animatable_field,
)


class ExposureSettings(Serializable):
    """Nested composite value two levels deep."""

    stops: float = animatable_field(0.0)
    auto: bool = animatable_field(True)


class PostProcessSettings(Serializable):
    """Nested composite value stored on the camera."""

    bloom_intensity: float = animatable_field(1.0)
    tint: Color = animatable_field(default_factory=Color)
    exposure: ExposureSettings = animatable_field(default_factory=ExposureSettings)
    preset_name: str = animatable_field("default")


class Camera(Component):
    field_of_view: float = animatable_field(60.0)
    near_clip: float = animatable_field(0.1)
    projection: str = "perspective"
    sample_count: int = 4
    viewport_offset: Vector2 = animatable_field(default_factory=Vector2)
    post_process: PostProcessSettings = animatable_field(
        default_factory=PostProcessSettings
    )
    layers: list[int] = animatable_field(default_factory=list)


class Light(Component):
    intensity: float = animatable_field(1.0)
    color: Color = animatable_field(default_factory=Color)
    cast_shadows: bool = animatable_field(False)
    shadow_bias: Vector4 = animatable_field(default_factory=Vector4)
    range: int = animatable_field(10)


class Renderable(Component):
    mesh_path: str = ""
    bounds_offset: Vector3 = Vector3()


