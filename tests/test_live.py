# -*- coding: utf-8 -*-

import numpy as npy
import pytest
from PIL import Image as PILImage

import HistoSeg.live as live_module
from HistoSeg.camera import VirtualCamera
from HistoSeg.commands import CommandDispatcher
from HistoSeg.image import blank
from HistoSeg.session import Session

from tests.helpers import BLACK, RED, halves


@pytest.fixture
def session(config):
    return Session(config=config)


def test_render_without_recognition(session):
    frame = halves(128, 96, BLACK, RED)
    dispatcher = CommandDispatcher(session)
    input_view, reco_view = live_module.render(frame, session, dispatcher)
    assert input_view.shape == reco_view.shape == frame.shape
    # guide rectangles are drawn on copies
    assert (frame[:, :64] == 0).all()
    assert (input_view[0, 0] == 255).all()


def test_render_with_recognition(session):
    frame = halves(128, 96, BLACK, RED)
    session.capture_background(blank(128, 128, BLACK))
    session.capture_object(blank(64, 64, RED))
    dispatcher = CommandDispatcher(session)
    dispatcher.recognizing = True
    _, reco_view = live_module.render(frame, session, dispatcher)
    assert npy.array_equal(reco_view, session.recognize(frame))


class FakeGui(object):
    def __init__(self, keys):
        self.keys = list(keys)
        self.shown = []
        self.destroyed = False

    def waitKey(self, delay):
        return self.keys.pop(0) if self.keys else ord('q')

    def imshow(self, name, img):
        self.shown.append(name)

    def namedWindow(self, name, flags):
        pass

    def destroyAllWindows(self):
        self.destroyed = True


def test_live_loop_runs_key_commands(monkeypatch, session):
    gui = FakeGui([ord('b'), -1, ord('a'), ord('r'), -1, ord('q')])
    for name in ('waitKey', 'imshow', 'namedWindow', 'destroyAllWindows'):
        monkeypatch.setattr(live_module.cv2, name, getattr(gui, name))

    cam = VirtualCamera(halves(256, 128, BLACK, RED))
    dispatcher = CommandDispatcher(session)
    live_module.live(cam, session, dispatcher)

    assert dispatcher.done
    assert dispatcher.recognizing
    assert len(session.background_set) == 2
    assert len(session.object_set) == 1
    assert gui.destroyed
    assert gui.shown.count('reco') == 5


def test_main_with_image(monkeypatch, tmp_path):
    path = str(tmp_path / 'frame.png')
    PILImage.new('RGB', (32, 32), (0, 0, 0)).save(path)
    calls = []
    monkeypatch.setattr(live_module, 'live',
                        lambda source, session: calls.append(
                            (source, session)))
    assert live_module.main(['--image', path]) == 0
    source, session = calls[0]
    assert source.get_image().shape == (32, 32, 3)
    assert isinstance(session, Session)


def test_parser_rejects_two_sources():
    with pytest.raises(SystemExit):
        live_module.build_parser().parse_args(
            ['--camera', '0', '--image', 'a.png'])
