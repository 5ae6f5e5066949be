"""
Tests for MCP tools.

Tests the interpretation and tune library tools through a mock server.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_play.tools import register_play_tools, register_tune_tools
from chuk_mcp_play.tunes import TuneLoader

LIBRARY_PATH = Path(__file__).parent.parent / "src" / "chuk_mcp_play" / "tunes" / "library"


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def play_tools(temp_dir: Path) -> dict:
    return register_play_tools(MockMCPServer("test"), temp_dir / "output")


@pytest.fixture
def tune_tools(temp_dir: Path) -> dict:
    loader = TuneLoader(library_path=LIBRARY_PATH, project_path=temp_dir / "tunes")
    return register_tune_tools(MockMCPServer("test"), loader, temp_dir / "output")


class TestRegistration:
    def test_tools_registered_on_server(self, temp_dir: Path) -> None:
        mcp = MockMCPServer("test")
        register_play_tools(mcp, temp_dir)
        register_tune_tools(mcp, TuneLoader(library_path=LIBRARY_PATH), temp_dir)
        assert set(mcp.tools) == {
            "play_interpret",
            "play_validate",
            "play_render_midi",
            "play_list_tunes",
            "play_describe_tune",
            "play_save_tune",
            "play_render_tune",
        }


class TestPlayTools:
    """Tests for interpretation tools."""

    @pytest.mark.asyncio
    async def test_interpret(self, play_tools: dict):
        result = await play_tools["play_interpret"](notation="T120 O3 MN L4 C P4")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["events"] == [
            {"type": "tone", "frequency_hz": 262, "duration_ms": 438},
            {"type": "silence", "duration_ms": 438},
        ]
        assert data["tone_count"] == 1
        assert data["silence_count"] == 1
        assert data["total_duration_ms"] == 876

    @pytest.mark.asyncio
    async def test_interpret_error(self, play_tools: dict):
        result = await play_tools["play_interpret"](notation="O9")
        data = json.loads(result)
        assert data["status"] == "error"
        assert data["error"]["kind"] == "octave_out_of_range"
        assert data["error"]["index"] == 1

    @pytest.mark.asyncio
    async def test_validate_valid(self, play_tools: dict):
        data = json.loads(await play_tools["play_validate"](notation="MB L8 C D E"))
        assert data["valid"] is True

    @pytest.mark.asyncio
    async def test_validate_invalid(self, play_tools: dict):
        data = json.loads(await play_tools["play_validate"](notation="C..."))
        assert data["status"] == "success"
        assert data["valid"] is False
        assert data["error"]["kind"] == "invalid_dotted_count"
        assert data["error"]["index"] == 3

    @pytest.mark.asyncio
    async def test_render_midi(self, play_tools: dict):
        data = json.loads(await play_tools["play_render_midi"](notation="C D E P4 F", output_name="scale"))
        assert data["status"] == "success"
        assert data["note_count"] == 4
        assert Path(data["path"]).exists()
        assert Path(data["path"]).name == "scale.mid"

    @pytest.mark.asyncio
    async def test_render_midi_error_writes_nothing(self, play_tools: dict, temp_dir: Path):
        data = json.loads(await play_tools["play_render_midi"](notation="C Z", output_name="bad"))
        assert data["status"] == "error"
        assert data["error"]["kind"] == "unexpected_character"
        assert not (temp_dir / "output" / "bad.mid").exists()


class TestTuneTools:
    """Tests for tune library tools."""

    @pytest.mark.asyncio
    async def test_list_tunes(self, tune_tools: dict):
        data = json.loads(await tune_tools["play_list_tunes"]())
        assert data["status"] == "success"
        assert data["count"] == len(data["tunes"])
        assert "jingle_bells" in [t["name"] for t in data["tunes"]]

    @pytest.mark.asyncio
    async def test_describe_tune(self, tune_tools: dict):
        data = json.loads(await tune_tools["play_describe_tune"](name="ode_to_joy"))
        assert data["status"] == "success"
        assert data["tune"]["title"] == "Ode to Joy"
        assert "notation" in data["tune"]

    @pytest.mark.asyncio
    async def test_describe_missing(self, tune_tools: dict):
        data = json.loads(await tune_tools["play_describe_tune"](name="nonexistent"))
        assert data["status"] == "error"
        assert "not found" in data["message"]

    @pytest.mark.asyncio
    async def test_save_tune(self, tune_tools: dict):
        data = json.loads(await tune_tools["play_save_tune"](name="riff", notation="T140 L8 C E G"))
        assert data["status"] == "success"
        assert Path(data["path"]).exists()

        described = json.loads(await tune_tools["play_describe_tune"](name="riff"))
        assert described["tune"]["notation"] == "T140 L8 C E G"

    @pytest.mark.asyncio
    async def test_save_invalid_notation(self, tune_tools: dict, temp_dir: Path):
        data = json.loads(await tune_tools["play_save_tune"](name="bad", notation="T999"))
        assert data["status"] == "error"
        assert data["error"]["kind"] == "tempo_out_of_range"
        assert not (temp_dir / "tunes" / "bad.yaml").exists()

    @pytest.mark.asyncio
    async def test_save_empty_notation(self, tune_tools: dict):
        data = json.loads(await tune_tools["play_save_tune"](name="empty", notation=""))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_render_tune(self, tune_tools: dict):
        data = json.loads(await tune_tools["play_render_tune"](name="jingle_bells"))
        assert data["status"] == "success"
        assert data["note_count"] == 51
        assert Path(data["path"]).name == "jingle_bells.mid"

    @pytest.mark.asyncio
    async def test_render_missing_tune(self, tune_tools: dict):
        data = json.loads(await tune_tools["play_render_tune"](name="nonexistent"))
        assert data["status"] == "error"
