import argparse
import os

from ExampleSceneDef import EXAMPLES
from tracer import MAX_DEPTH


def render(scene_def, output_path, width=400, height=400, show=False, verbose=True):
    """Render scene_def to output_path as a PNG and return the Image."""
    output_path = os.path.abspath(os.path.expanduser(output_path))
    im = scene_def.render(output_path, output_shape=[height, width], verbose=verbose)
    print("Done!")
    if show:
        im.show(title=os.path.basename(output_path))
    return im


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Render a Whitted-style ray traced scene to a PNG.")
    p.add_argument('output', nargs='?', default='test.png', help='where to write the image')
    p.add_argument('--width', type=int, default=400)
    p.add_argument('--height', type=int, default=400)
    p.add_argument('--max-depth', type=int, default=MAX_DEPTH, help='mirror bounces followed per primary ray')
    p.add_argument('--scene', choices=sorted(EXAMPLES), default='two-spheres')
    p.add_argument('--show', action='store_true', help='preview the image after writing it')
    p.add_argument('--quiet', action='store_true', help='no per-row progress output')
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        raise SystemExit("error: --width and --height must be positive")
    if args.max_depth < 0:
        raise SystemExit("error: --max-depth must be non-negative")
    scene_def = EXAMPLES[args.scene](max_depth=args.max_depth)
    render(scene_def, args.output, args.width, args.height, show=args.show, verbose=not args.quiet)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
