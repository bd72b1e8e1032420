from PIL import Image as PIM
import numpy as np

import matplotlib
import matplotlib.pyplot as plt


class Image(object):
    """Image
    """

    def __init__(self, path=None, pixels=None, **kwargs):
        # You can do Image(pixels) or Image(path)
        self._samples = None;
        self.file_path = None;
        if (isinstance(path, np.ndarray) and (pixels is None)):
            # if the path looks like pixels and pixels are undefined, treat the path as pixels
            self.pixels = path;
        else:
            self.pixels = pixels;
            self.file_path = path;
            if(self.file_path is not None and pixels is None):
                self.loadImageData(self.file_path);

    @property
    def pixels(self):
        return self.samples;

    @pixels.setter
    def pixels(self, data):
        self.samples = data;

    @property
    def samples(self):
        return self._samples;

    @samples.setter
    def samples(self, value):
        self._samples = value;

    @property
    def dtype(self):
        return self.pixels.dtype;

    @property
    def _is_int(self):
        return (self.dtype.kind in 'iu');

    @property
    def ipixels(self):
        """
        8-bit pixel access; integer samples are clamped to 0..255, float samples are scaled from 0..1
        :return:
        """
        if (self._is_int):
            return np.clip(self.pixels, 0, 255).astype(np.uint8);
        else:
            return (np.clip(self.pixels, 0.0, 1.0) * 255).astype(np.uint8);

    @property
    def shape(self):
        return np.asarray(self.pixels.shape)[:];

    @property
    def width(self):
        return self.shape[1];

    @property
    def height(self):
        return self.shape[0];

    def loadImageData(self, path=None):
        if (path):
            self.file_path = path;
        if (self.file_path):
            pim = PIM.open(fp=self.file_path);
            self._samples = np.array(pim);

    def PIL(self):
        return PIM.fromarray(self.ipixels);

    def writeToFile(self, output_path=None, **kwargs):
        if (output_path is None):
            output_path = self.file_path;
        self.PIL().save(output_path, **kwargs);
        self.file_path = output_path;

    def show(self, title=None, new_figure=True):
        if (new_figure):
            plt.figure();
        plt.imshow(self.ipixels);
        plt.axis('off');
        if (title is not None):
            plt.title(title);
        if (matplotlib.get_backend().lower() != 'agg'):
            plt.show();
