# -*- coding: utf-8 -*-

"""
Interactive segmentation from a camera or an image.

Keys:
    b       capture the background (whole frame)
    a       capture the object (square at the center)
    v       print the distance between the left and right halves
    r       switch the recognition view on and off
    f       freeze / unfreeze the frame
    q, ESC  quit
"""

import argparse
import sys

from HistoSeg.base import cv2, npy, logger
from HistoSeg.camera import Camera, VirtualCamera
from HistoSeg.color import Color
from HistoSeg.commands import CommandDispatcher
from HistoSeg.config import Config
from HistoSeg.session import Session


__all__ = [
    'annotate', 'render', 'live', 'main'
]

INPUT_WINDOW = 'input'
RECO_WINDOW = 'reco'


def annotate(frame, session):
    """
    Copy of the frame with the compared halves and the object capture
    square drawn on it.
    """
    out = npy.copy(frame)
    white = Color.WHITE
    for region in session.halves(frame) + (session.object_region(frame),):
        bottom_right = (region.bottom_right.x - 1, region.bottom_right.y - 1)
        cv2.rectangle(out, tuple(region.top_left), bottom_right, white, 1)
    return out


def render(frame, session, dispatcher):
    """
    The two views of the live loop.

    :return: (input view, reco view)
    """
    if dispatcher.recognizing:
        reco = session.recognize(frame)
    else:
        reco = npy.copy(frame)
        region = session.object_region(frame)
        bottom_right = (region.bottom_right.x - 1, region.bottom_right.y - 1)
        cv2.rectangle(reco, tuple(region.top_left), bottom_right,
                      Color.WHITE, 1)
    return annotate(frame, session), reco


def live(source, session=None, dispatcher=None, wait=50):
    """
    Show the frames of ``source`` and run the key commands until quit.

    :param source: a FrameSource
    :param wait: milliseconds to wait for a key between two frames
    """
    session = session or Session()
    dispatcher = dispatcher or CommandDispatcher(session)
    frame = None

    cv2.namedWindow(INPUT_WINDOW, 1)
    cv2.namedWindow(RECO_WINDOW, 1)
    try:
        while not dispatcher.done:
            key = cv2.waitKey(wait)
            if frame is None or not dispatcher.frozen:
                img = source.get_image()
                if img is None:
                    break
                frame = img

            dispatcher.post_key(key)
            dispatcher.dispatch(frame)
            if dispatcher.done:
                break

            input_view, reco_view = render(frame, session, dispatcher)
            cv2.imshow(RECO_WINDOW, reco_view)
            cv2.imshow(INPUT_WINDOW, input_view)
    finally:
        cv2.destroyAllWindows()
        source.release()


def build_parser():
    parser = argparse.ArgumentParser(
        prog='histoseg',
        description='Object/background segmentation by color histograms.',
        epilog=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--camera', type=int, default=None,
                        help='camera index (default from the config)')
    source.add_argument('--image', nargs='+', default=None,
                        help='image files played in a loop')
    parser.add_argument('--config', default=None, help='INI config file')
    parser.add_argument('--block-size', type=int, default=None,
                        help='side of the classified blocks')
    parser.add_argument('--log-level', default=None,
                        choices=['trace', 'debug', 'info', 'warning',
                                 'error', 'critical'])
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.config:
        Config.read_file_path(args.config)
    if args.log_level:
        Config.set('logging', 'level', args.log_level)
    if args.block_size:
        Config.set('segmentation', 'block_size', args.block_size)

    try:
        if args.image:
            source = VirtualCamera(args.image)
        else:
            index = args.camera
            if index is None:
                index = Config.getint('camera', 'index')
            source = Camera(index, {
                'width': Config.getint('camera', 'width'),
                'height': Config.getint('camera', 'height'),
            })
    except IOError as e:
        logger.error('Live: {}'.format(e))
        return 1

    live(source, Session())
    return 0


if __name__ == '__main__':
    sys.exit(main())
