import tracer
from ImLite import Image
from utils import vec


class ExampleSceneDef(object):
    def __init__(self, tracer):
        self.tracer = tracer;

    @property
    def scene(self):
        return self.tracer.scene;

    def render(self, output_path=None, output_shape=None, verbose=False):
        if(output_shape is None):
            output_shape=[400,400];
        pix = tracer.render_image(self.tracer, output_shape[1], output_shape[0], verbose=verbose);
        im = Image(pixels=pix);
        if(output_path is None):
            return im;
        else:
            im.writeToFile(output_path);
            return im;


def TwoSpheresExample(max_depth=tracer.MAX_DEPTH):
    light_source = tracer.LightSource(vec([0, 1000, 0]), 400, vec([255, 255, 255]), 1.0)

    scene = tracer.Scene(
        light_source,
        [
            light_source,
            tracer.Sphere(vec([-200, 0, -200]), 150, vec([0, 0, 255]), 0.9),
            tracer.Sphere(vec([200, 0, -200]), 150, vec([255, 0, 0]), 0.9),
        ],
        ambient_coeff=0.2,
        diffuse_coeff=0.8,
    )

    camera = tracer.Tracer(scene, camera_location=vec([0, 0, 200]), frame_z=50, max_depth=max_depth)
    return ExampleSceneDef(tracer=camera);


def MirrorPairExample(max_depth=tracer.MAX_DEPTH):
    # two perfect mirrors facing each other; only the depth cap stops the bounces
    light_source = tracer.LightSource(vec([0, 1000, 0]), 300, vec([255, 255, 220]), 1.0)

    scene = tracer.Scene(
        light_source,
        [
            light_source,
            tracer.Sphere(vec([-160, 0, -150]), 120, vec([40, 200, 40]), 1.0),
            tracer.Sphere(vec([160, 0, -150]), 120, vec([200, 200, 40]), 1.0),
        ],
    )

    camera = tracer.Tracer(scene, camera_location=vec([0, 0, 200]), frame_z=50, max_depth=max_depth)
    return ExampleSceneDef(tracer=camera);


EXAMPLES = {
    'two-spheres': TwoSpheresExample,
    'mirror-pair': MirrorPairExample,
}
