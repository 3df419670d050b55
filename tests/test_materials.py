"""Tests for material scattering and emission."""

import pytest

from core.ray import Ray
from core.vector import Color, Point3, Vector3
from geometry.hittable import HitRecord
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import ColorPresets, DielectricPresets, LightPresets, MetalPresets
from materials.textures import CheckerTexture

UP = Vector3(0, 1, 0)


def surface_hit(material, normal=UP, front_face=True, p=None):
    return HitRecord(p=p if p is not None else Point3(0, 0, 0), normal=normal, t=1.0,
                     front_face=front_face, material=material)


class TestLambertian:
    """Tests for diffuse scattering."""

    def test_always_scatters_into_upper_hemisphere(self, gray, rng):
        rec = surface_hit(gray)
        for _ in range(300):
            attenuation, scattered = gray.scatter(Ray(Point3(0, 1, 0), Vector3(0, -1, 0), 0.4), rec, rng)
            assert attenuation == Color(0.5, 0.5, 0.5)
            assert scattered.origin == rec.p
            assert scattered.direction.dot(UP) >= 0
            assert scattered.time == 0.4

    def test_textured_albedo(self, rng):
        checker = CheckerTexture(1.0, Color(1, 0, 0), Color(0, 0, 1))
        material = Lambertian(checker)
        even, _ = material.scatter(Ray(Point3(), Vector3(0, -1, 0)),
                                   surface_hit(material, p=Point3(0.5, 0.5, 0.5)), rng)
        odd, _ = material.scatter(Ray(Point3(), Vector3(0, -1, 0)),
                                  surface_hit(material, p=Point3(1.5, 0.5, 0.5)), rng)
        assert even == Color(1, 0, 0)
        assert odd == Color(0, 0, 1)

    def test_does_not_emit(self, gray):
        assert gray.emitted(0.0, 0.0, Point3()) == Color(0, 0, 0)


class TestMetal:
    """Tests for specular reflection."""

    def test_polished_reflection(self, rng):
        material = Metal(Color(0.8, 0.6, 0.2))
        attenuation, scattered = material.scatter(
            Ray(Point3(-1, 1, 0), Vector3(1, -1, 0)), surface_hit(material), rng)
        assert attenuation == Color(0.8, 0.6, 0.2)
        direction = scattered.direction
        assert direction.x == pytest.approx(2 ** -0.5)
        assert direction.y == pytest.approx(2 ** -0.5)
        assert direction.z == pytest.approx(0.0)

    def test_fuzz_is_clamped(self):
        assert Metal(Color(1, 1, 1), 5.0).fuzz == 1.0
        assert Metal(Color(1, 1, 1), -1.0).fuzz == 0.0

    def test_fuzzed_ray_below_surface_is_absorbed(self, rng):
        material = Metal(Color(1, 1, 1), 1.0)
        rec = surface_hit(material)
        grazing = Ray(Point3(-1, 0, 0), Vector3(1, -1e-6, 0))
        absorbed = 0
        for _ in range(200):
            result = material.scatter(grazing, rec, rng)
            if result is None:
                absorbed += 1
            else:
                assert result[1].direction.dot(UP) > 0
        assert 0 < absorbed < 200

    def test_presets(self):
        assert MetalPresets.mirror().fuzz == 0.0


class TestDielectric:
    """Tests for refraction, Fresnel reflection and total internal reflection."""

    def test_always_scatters_without_absorbing(self, rng):
        glass = Dielectric(1.5)
        rec = surface_hit(glass)
        for _ in range(200):
            attenuation, scattered = glass.scatter(
                Ray(Point3(0, 1, 0), Vector3(0.3, -1, 0.2)), rec, rng)
            assert attenuation == Color(1, 1, 1)
            assert scattered.origin == rec.p

    def test_total_internal_reflection(self, rng):
        glass = Dielectric(1.5)
        # Leaving the glass at sin(theta) = 0.8, past the critical angle
        rec = surface_hit(glass, front_face=False)
        for _ in range(50):
            _, scattered = glass.scatter(Ray(Point3(), Vector3(0.8, -0.6, 0)), rec, rng)
            assert scattered.direction.x == pytest.approx(0.8)
            assert scattered.direction.y == pytest.approx(0.6)

    def test_normal_incidence_mostly_refracts(self, rng):
        glass = Dielectric(1.5)
        rec = surface_hit(glass)
        reflected = 0
        draws = 2000
        for _ in range(draws):
            _, scattered = glass.scatter(Ray(Point3(0, 1, 0), Vector3(0, -1, 0)), rec, rng)
            if scattered.direction.y > 0:
                reflected += 1
            else:
                assert scattered.direction.y == pytest.approx(-1.0)
        # Schlick reflectance at normal incidence is 0.04
        assert 0.01 < reflected / draws < 0.08

    def test_presets(self):
        assert DielectricPresets.glass().refraction_index == 1.5


class TestDiffuseLight:
    """Tests for emitters."""

    def test_emits_and_never_scatters(self, light, rng):
        rec = surface_hit(light)
        assert light.scatter(Ray(Point3(0, 1, 0), Vector3(0, -1, 0)), rec, rng) is None
        assert light.emitted(0.3, 0.7, rec.p) == Color(4.0, 2.0, 1.0)

    def test_textured_emission(self):
        emitter = DiffuseLight(CheckerTexture(1.0, Color(2, 2, 2), Color(0, 0, 0)))
        assert emitter.emitted(0, 0, Point3(0.5, 0.5, 0.5)) == Color(2, 2, 2)
        assert emitter.emitted(0, 0, Point3(1.5, 0.5, 0.5)) == Color(0, 0, 0)

    def test_light_presets_scale_with_intensity(self):
        dim = LightPresets.daylight(1).emitted(0, 0, Point3())
        bright = LightPresets.daylight(15).emitted(0, 0, Point3())
        assert bright.x == pytest.approx(dim.x * 15)

    def test_matte_preset(self):
        assert isinstance(ColorPresets.matte(ColorPresets.RED), Lambertian)
