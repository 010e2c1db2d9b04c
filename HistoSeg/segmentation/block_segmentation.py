# -*- coding: utf-8 -*-

from HistoSeg.base import cv2, npy, logger
from HistoSeg.color import Color, Label
from HistoSeg.exceptions import SegmentationError
from HistoSeg.image import Region, validate
from HistoSeg.segmentation.classifier import HistogramClassifier
from HistoSeg.segmentation.reference_set import ReferenceSet
from HistoSeg.segmentation.sampler import sample
from HistoSeg.segmentation.segmentation_base import SegmentationBase


__all__ = [
    'BlockSegmentation', 'block_grid', 'label_grid', 'segment', 'paint',
    'overlay'
]


def block_grid(width, height, block_size, partial=True):
    """
    Regions of the blocks tiling a ``width`` x ``height`` frame, row after
    row from the top left corner.

    :param partial: when True the last column and row keep the blocks that
                    hang over the edge, clipped to the frame; otherwise
                    those blocks are dropped.
    :return: generator of Region
    """
    if block_size < 1:
        raise ValueError('Block size must be positive, got {}'.format(
            block_size))

    if partial:
        ys = range(0, height, block_size)
        xs = range(0, width, block_size)
    else:
        ys = range(0, height - block_size + 1, block_size)
        xs = range(0, width - block_size + 1, block_size)

    for y in ys:
        for x in xs:
            yield Region((x, y), (min(x + block_size, width),
                                  min(y + block_size, height)))


def label_grid(image, background_set, object_set, block_size):
    """
    Classify every block of ``image``.

    :return: int array of shape (rows, columns) holding one Label per block
    """
    validate(image)
    if block_size < 1:
        raise ValueError('Block size must be positive, got {}'.format(
            block_size))
    height, width = image.shape[:2]
    rows = -(-height // block_size)
    cols = -(-width // block_size)
    labels = npy.empty((rows, cols), dtype=npy.uint8)
    classifier = HistogramClassifier(background_set, object_set)

    for region in block_grid(width, height, block_size):
        cd = sample(image, region.top_left, region.bottom_right)
        labels[region.top_left.y // block_size,
               region.top_left.x // block_size] = classifier.classify(cd)

    return labels


def paint(labels, width, height, block_size, colors=None):
    """
    Paint every block with the color of its label.

    :param labels: array as returned by label_grid()
    :param colors: mapping (or sequence) from Label to a 3 channel color
    :return: (height, width, 3) uint8 image
    """
    if colors is None:
        colors = Color.label_colors()
    palette = npy.array([colors[Label.BACKGROUND], colors[Label.OBJECT]],
                        dtype=npy.uint8)
    # one pixel per block, scaled up then cropped to the frame
    blocks = palette[labels]
    out = npy.repeat(npy.repeat(blocks, block_size, axis=0), block_size,
                     axis=1)
    return npy.ascontiguousarray(out[:height, :width])


def segment(image, background_set, object_set, block_size, colors=None):
    """
    Segment ``image`` into object and background blocks.

    Every ``block_size`` x ``block_size`` block is classified against the
    two reference sets and painted with its label color. The input is left
    untouched.

    :param image: (height, width, 3) uint8 frame
    :param background_set: ReferenceSet of the background
    :param object_set: ReferenceSet of the object
    :param block_size: side of the blocks, in pixels
    :param colors: mapping (or sequence) from Label to paint color, BGR
                   black and red by default
    :return: new image of the same shape
    """
    labels = label_grid(image, background_set, object_set, block_size)
    height, width = image.shape[:2]
    return paint(labels, width, height, block_size, colors)


def overlay(image, segmented, alpha=0.5):
    """
    Blend a segmentation over the gray version of the frame it comes from.

    :param alpha: weight of the segmentation, the frame gets 1 - alpha
    """
    validate(image)
    gray = cv2.cvtColor(cv2.cvtColor(image, cv2.COLOR_BGR2GRAY),
                        cv2.COLOR_GRAY2BGR)
    return cv2.addWeighted(segmented, alpha, gray, 1.0 - alpha, 0.0)


class BlockSegmentation(SegmentationBase):
    """
    Segments images block by block, comparing the color histogram of each
    block to reference histograms of the background and of the object.

    The general usage is
    >>> segmentor = BlockSegmentation(block_size=8)
    >>> segmentor.add_reference(Label.BACKGROUND, bg_distribution)
    >>> segmentor.add_reference(Label.OBJECT, obj_distribution)
    >>> segmentor.add_image(frame)
    >>> if segmentor.is_ready():
    >>>     img = segmentor.segmented_image
    """

    def __init__(self, background_set=None, object_set=None, block_size=8,
                 colors=None):
        if block_size < 1:
            raise ValueError('Block size must be positive, got {}'.format(
                block_size))
        if background_set is None:
            background_set = ReferenceSet(Label.BACKGROUND)
        if object_set is None:
            object_set = ReferenceSet(Label.OBJECT)
        self._background_set = background_set
        self._object_set = object_set
        self._block_size = block_size
        self._colors = colors
        self._error = False
        self._labels = None
        self._cur_img = None
        self._truth_img = None

    def add_image(self, img):
        """
        Add a single image to the segmentation algorithm
        """
        if img is None:
            return

        try:
            labels = label_grid(img, self._background_set, self._object_set,
                                self._block_size)
        except (SegmentationError, ValueError) as e:
            logger.warning('BlockSegmentation: {}'.format(e))
            self._error = True
            return

        height, width = img.shape[:2]
        self._truth_img = img
        self._labels = labels
        self._cur_img = paint(labels, width, height, self._block_size,
                              self._colors)

    def is_ready(self):
        return self._cur_img is not None

    def is_error(self):
        return self._error

    def reset_error(self):
        self._error = False

    def reset(self):
        """
        Drop the reference histograms and the last result.
        """
        self._background_set.clear()
        self._object_set.clear()
        self._labels = None
        self._cur_img = None
        self._truth_img = None

    @property
    def raw_image(self):
        return self._labels

    @property
    def segmented_image(self):
        return self._cur_img

    @property
    def overlay_image(self):
        """
        The last segmentation blended over its gray source image.
        """
        if self._cur_img is None:
            return None
        return overlay(self._truth_img, self._cur_img)

    @property
    def block_size(self):
        return self._block_size

    @property
    def background_set(self):
        return self._background_set

    @property
    def object_set(self):
        return self._object_set

    # The following are class specific methods

    def add_reference(self, label, distribution):
        if label == Label.OBJECT:
            self._object_set.append(distribution)
        else:
            self._background_set.append(distribution)

    def __getstate__(self):
        state = self.__dict__.copy()
        del state['_truth_img']
        del state['_cur_img']
        return state

    def __setstate__(self, state):
        self.__dict__ = state
        self._truth_img = None
        self._cur_img = None
