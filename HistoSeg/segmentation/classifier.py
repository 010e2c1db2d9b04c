# -*- coding: utf-8 -*-

from HistoSeg.color import Label


__all__ = [
    'HistogramClassifier', 'classify'
]


class HistogramClassifier(object):
    """
    Nearest reference classifier: a block belongs to the class whose
    reference set holds the closest color distribution.

    Ties go to the background. The object only wins with a strictly
    smaller distance, so a block is background whenever both sets are
    empty, or only the object set is.
    """

    def __init__(self, background_set, object_set):
        self.background_set = background_set
        self.object_set = object_set

    def scores(self, distribution):
        """
        Minimum distances to the background and object sets.

        :return: (background distance, object distance)
        """
        return (self.background_set.minimum_distance(distribution),
                self.object_set.minimum_distance(distribution))

    def classify(self, distribution):
        dist_background, dist_object = self.scores(distribution)
        if dist_object < dist_background:
            return Label.OBJECT
        return Label.BACKGROUND


def classify(distribution, background_set, object_set):
    """
    Label of ``distribution`` given the two reference sets.

    :return: Label.OBJECT or Label.BACKGROUND
    """
    return HistogramClassifier(background_set, object_set).classify(
        distribution)
