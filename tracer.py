import numpy as np
from geometry import Ray, Sphere, LightSource
from utils import vec, normalize, to_rgba8

"""
Core implementation of the ray tracer.
"""

MAX_DEPTH = 4 # max reflection depth


class Scene:

    def __init__(self, light_source, objects=None, ambient_coeff=0.2, diffuse_coeff=0.8):
        """Create a scene lit by a single point light.

        Parameters:
          light_source : LightSource -- the light; it is also the first surface in objects
          objects : list -- surfaces tested in order; the light is prepended if missing
          ambient_coeff : float -- color factor applied everywhere
          diffuse_coeff : float -- color factor scaled by the cosine to the light
        """
        objects = list(objects) if objects is not None else []
        positions = [i for i, o in enumerate(objects) if o is light_source]
        if not positions:
            objects.insert(0, light_source)
        elif positions != [0]:
            raise ValueError("the light source must be the first surface of the scene, exactly once")
        self.light_source = light_source
        self.objects = tuple(objects)
        self.ambient_coeff = ambient_coeff
        self.diffuse_coeff = diffuse_coeff

    def light_location(self):
        return self.light_source.origin


class Tracer:

    def __init__(self, scene, camera_location=vec([0, 0, 200]), frame_z=50, max_depth=MAX_DEPTH):
        """Create a tracer looking down -z through a frame plane at z = frame_z.

        Parameters:
          scene : Scene -- the surfaces and light to render
          camera_location : (3,) -- origin of every primary ray
          frame_z : float -- depth of the virtual frame plane, centered at (0, 0, frame_z)
          max_depth : int -- how many mirror bounces are followed before falling back to diffuse
        """
        if max_depth < 0:
            raise ValueError("max_depth must be non-negative, got %r" % (max_depth,))
        self.scene = scene
        self.camera_location = vec(camera_location)
        self.frame_z = frame_z
        self.max_depth = max_depth

    def primary_ray(self, x, y):
        """The camera ray through frame coordinate (x, y)."""
        point_on_frame = vec([x, y, self.frame_z])
        return Ray(self.camera_location, normalize(point_on_frame - self.camera_location))

    def trace_rays(self, frame_width, frame_height):
        """Yield (x, y, color) for every pixel, top row first, left to right.

        x runs over the frame_width integers starting at -(frame_width // 2),
        y over the frame_height integers counting down from frame_height // 2.
        color is None where no surface contributes.
        """
        if frame_width <= 0 or frame_height <= 0:
            raise ValueError("frame dimensions must be positive, got %rx%r" % (frame_width, frame_height))
        x_start = -(frame_width // 2)
        y_start = frame_height // 2
        for row in range(frame_height):
            y = y_start - row
            for col in range(frame_width):
                x = x_start + col
                yield x, y, self.trace_ray(self.primary_ray(x, y))

    def trace_ray(self, ray, exclude=None, depth=0):
        """Color from the first surface, in scene order, that contributes one.

        Parameters:
          ray : Ray -- the ray to resolve
          exclude : surface -- skipped, used by reflection rays to avoid self-hits
          depth : int -- number of reflections already followed
        Return:
          int array of RGB channels, or None
        """
        for surface in self.scene.objects:
            if surface is exclude:
                continue
            color = surface.color_for(ray, self, self.scene, depth)
            if color is not None:
                return color
        return None


def render_image(tracer, nx, ny, verbose=False):
    """
    render a ray traced image as an (ny, nx, 4) uint8 RGBA array.
    """
    output_image = np.zeros((ny, nx, 4), np.uint8)

    current_y = None
    for x, y, color in tracer.trace_rays(nx, ny):
        if verbose and y != current_y:
            current_y = y
            print(f"rendering row {ny // 2 - y + 1}/{ny}...")
        pixel_x = int(nx / 2 + x)
        pixel_y = int(ny - (ny / 2 + y))
        output_image[pixel_y, pixel_x] = to_rgba8(color)

    return output_image
