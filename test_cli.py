import os
import tempfile
import unittest

import numpy as np
from PIL import Image as PIM

import cli
from ExampleSceneDef import TwoSpheresExample, MirrorPairExample
from ImLite import Image


class TestExampleScenes(unittest.TestCase):

    def test_two_spheres_layout(self):
        example = TwoSpheresExample()
        scene = example.scene
        self.assertIs(scene.objects[0], scene.light_source)
        self.assertEqual(len(scene.objects), 3)
        self.assertEqual(scene.ambient_coeff, 0.2)
        self.assertEqual(scene.diffuse_coeff, 0.8)
        self.assertEqual(example.tracer.frame_z, 50)

    def test_render_returns_image(self):
        im = MirrorPairExample(max_depth=2).render(output_shape=[6, 8])
        self.assertEqual(im.width, 8)
        self.assertEqual(im.height, 6)
        self.assertTrue(np.all(im.pixels[:, :, 3] == 255))


class TestCli(unittest.TestCase):

    def test_writes_png(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'out.png')
            self.assertEqual(cli.main([path, '--width', '10', '--height', '6', '--quiet']), 0)
            with PIM.open(path) as written:
                self.assertEqual(written.size, (10, 6))
                self.assertEqual(written.mode, 'RGBA')

    def test_written_pixels_match_render(self):
        example = TwoSpheresExample()
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'two.png')
            im = cli.render(example, path, width=8, height=8, verbose=False)
            loaded = Image(path)
            np.testing.assert_array_equal(loaded.pixels, im.pixels)

    def test_rejects_bad_size(self):
        with self.assertRaises(SystemExit):
            cli.main(['unused.png', '--width', '0'])


if __name__ == '__main__':
    unittest.main()
