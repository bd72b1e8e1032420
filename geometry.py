import numpy as np
from utils import vec, normalize


class Ray:

    def __init__(self, origin, direction):
        """Create a ray with the given origin and direction.

        The direction is expected to be unit length and must not be zero.
        Both arrays are read-only copies.
        """
        self.origin = vec(origin)
        self.direction = vec(direction)
        if not np.any(self.direction):
            raise ValueError("ray direction must be non-zero")
        self.origin.flags.writeable = False
        self.direction.flags.writeable = False


class Sphere:

    def __init__(self, origin, radius, color, reflectivity=0.5):
        """Create a sphere with the given center and radius.

        Parameters:
          origin : (3,) -- a 3D point specifying the sphere's center
          radius : float -- a Python float specifying the sphere's radius
          color : (3,) -- the RGB base color, in 0..255 units
          reflectivity : float -- share of the final color taken from the mirror reflection
        """
        if not radius > 0:
            raise ValueError("sphere radius must be positive, got %r" % (radius,))
        if not 0.0 <= reflectivity <= 1.0:
            raise ValueError("reflectivity must lie in [0, 1], got %r" % (reflectivity,))
        self.origin = vec(origin)
        self.radius = radius
        self.color = vec(color)
        self.reflectivity = reflectivity

    def intersections(self, ray):
        """Computes the intersection points between a ray and this sphere.

        Parameters:
          ray : Ray -- the ray to intersect with the sphere
        Return:
          list of (3,) points ahead of the ray origin, nearest first,
          or None when the ray misses
        """
        p0 = ray.origin
        d = ray.direction
        sphere_vec = p0 - self.origin
        a = np.dot(d, d)
        b = 2 * np.dot(d, sphere_vec)
        c = np.dot(sphere_vec, sphere_vec) - self.radius * self.radius
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return None

        disc_sqrt = np.sqrt(discriminant)
        candidates = []
        for t in ((-b + disc_sqrt) / (2 * a), (-b - disc_sqrt) / (2 * a)):
            point = p0 + t * d
            # signed distance along the ray, not along the parameter t
            dist = np.dot(point - p0, d)
            if dist >= 0:
                candidates.append((dist, point))

        if not candidates:
            return None
        candidates.sort(key=lambda pair: pair[0])
        return [point for _, point in candidates]

    def normal_at(self, point):
        """Outward unit normal at a point on the sphere."""
        return normalize(point - self.origin)

    def color_at(self, point):
        return self.color

    @staticmethod
    def bounce_direction(ray_direction, normal):
        """Mirror the incoming direction about the normal."""
        c1 = -np.dot(ray_direction, normal)
        return normalize(ray_direction + 2 * c1 * normal)

    def diffuse_color(self, point, normal, scene):
        """Ambient plus Lambertian shading from the scene's point light."""
        light_vector = normalize(scene.light_location() - point)
        shade = max(0.0, np.dot(light_vector, normal))
        color_coeff = scene.ambient_coeff + shade * scene.diffuse_coeff
        return self.color_at(point) * color_coeff

    def color_for(self, ray, tracer, scene, depth=0):
        """Resolve the color this sphere contributes for the ray, or None if missed.

        The mirror term is traced through the tracer with this sphere excluded,
        and only while depth is below the tracer's max_depth.
        """
        intersections = self.intersections(ray)
        if intersections is None:
            return None
        point = intersections[0]
        normal = self.normal_at(point)

        # specular reflection
        reflected_color = None
        if depth < tracer.max_depth:
            reflected_ray = Ray(point, self.bounce_direction(ray.direction, normal))
            reflected_color = tracer.trace_ray(reflected_ray, self, depth + 1)

        # diffuse reflection
        diffuse = self.diffuse_color(point, normal, scene)

        if reflected_color is not None:
            k = self.reflectivity
            final_color = diffuse * (1 - k) + reflected_color * k
        else:
            final_color = diffuse

        return np.trunc(final_color).astype(np.int64)


class LightSource:

    def __init__(self, origin, radius, color, reflectivity=0.5):
        """Create an emissive sphere.

        The geometry is an ordinary Sphere; only color_for differs.
        """
        self.sphere = Sphere(origin, radius, color, reflectivity)

    @property
    def origin(self):
        return self.sphere.origin

    @property
    def radius(self):
        return self.sphere.radius

    @property
    def color(self):
        return self.sphere.color

    @property
    def reflectivity(self):
        return self.sphere.reflectivity

    def intersections(self, ray):
        return self.sphere.intersections(ray)

    def normal_at(self, point):
        return self.sphere.normal_at(point)

    def color_at(self, point):
        return self.sphere.color_at(point)

    def color_for(self, ray, tracer, scene, depth=0):
        """Raw base color when hit, with no shading or reflection."""
        if self.intersections(ray) is None:
            return None
        return self.color.copy()
