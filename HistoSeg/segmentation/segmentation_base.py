# -*- coding: utf-8 -*-

import abc
import pickle


__all__ = [
    'SegmentationBase'
]


class SegmentationBase(object, metaclass=abc.ABCMeta):
    @classmethod
    def load(cls, filename):
        """
        Load segmentation settings from file.
        """
        with open(filename, 'rb') as fd:
            return pickle.load(fd)

    def save(self, filename):
        """
        Save segmentation settings to file.
        """
        with open(filename, 'wb') as output:
            pickle.dump(self, output, 2)

    @abc.abstractmethod
    def add_image(self, img):
        """
        Add a single image to the segmentation algorithm
        """
        return

    @abc.abstractmethod
    def is_ready(self):
        """
        Returns true if the segmentation has a segmented image ready.
        """
        return False

    @abc.abstractmethod
    def is_error(self):
        """
        Returns true if the segmentation system has detected an error.
        """
        return False

    @abc.abstractmethod
    def reset_error(self):
        """
        Clear the previous error.
        """
        pass

    @abc.abstractmethod
    def reset(self):
        """
        Perform a reset of the segmentation systems underlying data.
        """
        pass

    @property
    @abc.abstractmethod
    def raw_image(self):
        """
        Return the per-block labels of the last image.
        """
        pass

    @property
    @abc.abstractmethod
    def segmented_image(self):
        """
        Return the segmented image, painted with one color per label.
        """
        pass
