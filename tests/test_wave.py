"""
Tests for the in-memory WAVE container.
"""
import pytest
import numpy as np
import soundfile as sf

from pcmclip.core.config import SAMPLE_FORMAT
from pcmclip.core.errors import CodecError
from pcmclip.core.wave import WaveFile, WaveHeader


@pytest.fixture
def stereo_wave() -> WaveFile:
    header = WaveHeader(num_channels=2, sample_rate=44100)
    return WaveFile("stereo.wav", header, np.arange(-4, 4, dtype=np.int16))


class TestWaveHeader:
    """Tests for header finalization."""

    def test_defaults(self):
        header = WaveHeader()
        assert header.bits_per_sample == 16
        assert header.audio_format == 1
        assert header.data_size == 0

    def test_update_header(self, stereo_wave):
        stereo_wave.update_header()
        h = stereo_wave.header
        assert h.block_align == 4
        assert h.byte_rate == 44100 * 4
        assert h.data_size == 16
        assert h.riff_size == 36 + 16

    def test_block_align_follows_sample_format(self, stereo_wave):
        stereo_wave.update_header()
        assert SAMPLE_FORMAT.bytes_per_sample == 2
        assert stereo_wave.header.block_align == 2 * SAMPLE_FORMAT.bytes_per_sample

    def test_update_header_tracks_sample_count(self, stereo_wave):
        stereo_wave.samples = np.zeros(100, dtype=np.int16)
        stereo_wave.update_header()
        assert stereo_wave.header.data_size == 200
        assert stereo_wave.num_frames == 50


class TestWaveFile:
    """Tests for WaveFile I/O."""

    def test_empty_file(self):
        wave = WaveFile("blank.wav")
        assert len(wave.samples) == 0
        assert wave.num_frames == 0

    def test_frames(self, stereo_wave):
        frames = stereo_wave.frames()
        assert frames.shape == (4, 2)
        assert frames[:, 0].tolist() == [-4, -2, 0, 2]
        assert frames[:, 1].tolist() == [-3, -1, 1, 3]

    def test_frames_uneven_rejected(self, stereo_wave):
        stereo_wave.samples = np.zeros(5, dtype=np.int16)
        with pytest.raises(CodecError):
            stereo_wave.frames()

    def test_open_interleaves(self, tmp_path):
        data = np.array([[1, 100], [2, 200], [3, 300]], dtype=np.int16)
        path = tmp_path / "in.wav"
        sf.write(str(path), data, 8000, subtype="PCM_16")

        wave = WaveFile.open(path)
        assert wave.file_name == str(path)
        assert wave.header.num_channels == 2
        assert wave.header.sample_rate == 8000
        assert wave.samples.tolist() == [1, 100, 2, 200, 3, 300]
        assert wave.header.data_size == 12

    def test_save_and_reopen(self, tmp_path, stereo_wave):
        path = stereo_wave.save(tmp_path / "out.wav")
        reopened = WaveFile.open(path)
        assert reopened.samples.tolist() == stereo_wave.samples.tolist()
        assert reopened.header.sample_rate == 44100
        assert sf.info(path).subtype == "PCM_16"

    def test_save_defaults_to_file_name(self, tmp_path, monkeypatch, stereo_wave):
        monkeypatch.chdir(tmp_path)
        assert stereo_wave.save() == "stereo.wav"
        assert (tmp_path / "stereo.wav").exists()

    def test_save_without_channels_rejected(self, tmp_path):
        wave = WaveFile("x.wav", WaveHeader(num_channels=0, sample_rate=8000))
        with pytest.raises(CodecError):
            wave.save(tmp_path / "x.wav")

    def test_save_to_missing_directory(self, tmp_path, stereo_wave):
        with pytest.raises(CodecError):
            stereo_wave.save(tmp_path / "no" / "such" / "dir.wav")

    def test_open_missing(self, tmp_path):
        with pytest.raises(CodecError):
            WaveFile.open(tmp_path / "nope.wav")

    def test_repr(self, stereo_wave):
        assert "stereo.wav" in repr(stereo_wave)
