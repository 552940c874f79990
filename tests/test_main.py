"""
Tests for the command-line front end.
"""
import pytest

from main import main
from pcmclip.core.clip import Clip
from pcmclip.core.codec import load_clip, save_clip


@pytest.fixture
def mono_path(tmp_path) -> str:
    clip = Clip.from_channels([[1, 2, 3, 4]], sample_rate=8000, name="mono")
    return save_clip(clip, tmp_path / "mono")


class TestCli:
    """Tests for main()."""

    def test_info(self, tone_path, capsys):
        assert main(["info", tone_path]) == 0
        out = capsys.readouterr().out
        assert "Clip(" in out
        assert "1.00s" in out

    def test_reverse(self, tone_path, tone_clip, tmp_path):
        out = str(tmp_path / "rev.wav")
        assert main(["reverse", tone_path, out]) == 0
        tone_clip.reverse()
        assert load_clip(out).is_equal(tone_clip)

    def test_stretch(self, tone_path, tmp_path):
        out = str(tmp_path / "slow.wav")
        assert main(["stretch", tone_path, out]) == 0
        assert load_clip(out).length == 16000

    def test_mix(self, mono_path, tmp_path):
        out = str(tmp_path / "mixed.wav")
        assert main(["mix", mono_path, mono_path, out]) == 0
        assert load_clip(out).channels[0].tolist() == [2, 4, 6, 8]

    def test_append(self, mono_path, tmp_path):
        out = str(tmp_path / "joined.wav")
        assert main(["append", mono_path, mono_path, out]) == 0
        assert load_clip(out).channels[0].tolist() == [1, 2, 3, 4, 1, 2, 3, 4]

    def test_slice(self, mono_path, tmp_path):
        out = str(tmp_path / "part")
        assert main(["slice", mono_path, "1", "3", out]) == 0
        assert load_clip(out + ".wav").channels[0].tolist() == [2, 3]

    def test_split(self, tone_path, tmp_path):
        prefix = str(tmp_path / "part")
        assert main(["split", tone_path, "4", prefix]) == 0
        parts = [load_clip(f"{prefix}_{i}.wav") for i in range(4)]
        assert all(p.length == 2000 for p in parts)

    def test_compare(self, tone_path, mono_path, capsys):
        assert main(["compare", tone_path, tone_path]) == 0
        assert "equal" in capsys.readouterr().out
        assert main(["compare", tone_path, mono_path]) == 1
        assert "channels" in capsys.readouterr().out

    def test_channel_mismatch_fails(self, tone_path, mono_path, tmp_path):
        assert main(["mix", tone_path, mono_path, str(tmp_path / "x.wav")]) == 1
        assert not (tmp_path / "x.wav").exists()

    def test_bad_slice_fails(self, mono_path, tmp_path):
        assert main(["slice", mono_path, "9", "12", str(tmp_path / "x.wav")]) == 1

    def test_missing_input_fails(self, tmp_path):
        assert main(["info", str(tmp_path / "missing.wav")]) == 1

    def test_unknown_command(self):
        with pytest.raises(SystemExit):
            main(["explode"])
