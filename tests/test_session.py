# test_session.py

import pytest
from unittest.mock import AsyncMock, Mock

from colordinate.config import ColordinateConfig
from colordinate.errors import SessionError, ValidationError
from colordinate.hosts import EmbeddedHost
from colordinate.model import parse
from colordinate.session import ColordinateSession, MemoryBuffer

DOCUMENT = (
    "Normal:\n"
    "  color:\n"
    "    fg: '#ffffff'\n"
    "    bg: '#000000'\n"
    "Comment:\n"
    "  color:\n"
    "    fg: '#888888'\n"
    "  style:\n"
    "  - italic\n"
    "  links:\n"
    "  - SpecialComment\n"
)


class TestMemoryBuffer:

    def test_set_text_trims(self):
        buffer = MemoryBuffer(text="\n\nA: {}\nB: {}\n\n")
        assert buffer.lines == ["A: {}", "B: {}"]
        assert buffer.get_text() == "A: {}\nB: {}"

    def test_empty(self):
        buffer = MemoryBuffer()
        assert buffer.lines == []
        assert buffer.get_text() == ""


class TestColordinateSession:
    """Test suite for the load/reflect/jump/save entry points."""

    def setup_method(self):
        self.host = EmbeddedHost.from_model(parse(DOCUMENT))
        self.logger = Mock()
        self.session = ColordinateSession(self.host, logger=self.logger)

    @pytest.mark.asyncio
    async def test_load_fills_buffer(self):
        model = await self.session.load()
        assert self.session.model == model
        assert parse(self.session.buffer.get_text()) == model
        assert model["Comment"].links == ["SpecialComment"]

    @pytest.mark.asyncio
    async def test_reflect_applies_edits(self):
        await self.session.load()
        self.session.buffer.set_text(
            "Normal:\n  color: {fg: red}\n  style: [bold]\n  links: [Visual]\n"
        )
        model = await self.session.reflect()
        assert model["Normal"].style == ["bold"]
        normal = next(i for i, g in enumerate(self.host.groups, 1) if g.name == "Normal")
        visual = next(i for i, g in enumerate(self.host.groups, 1) if g.name == "Visual")
        assert await self.host.attribute(normal, "fg") == "red"
        assert await self.host.translate(visual) == normal

    @pytest.mark.asyncio
    async def test_reflect_without_buffer(self):
        assert await self.session.reflect() is None

    @pytest.mark.asyncio
    async def test_reflect_invalid_document_leaves_host_alone(self):
        host = AsyncMock()
        session = ColordinateSession(host, MemoryBuffer(text="Normal:\n  style: [bogus]\n"),
                                     logger=self.logger)
        with pytest.raises(ValidationError):
            await session.reflect()
        host.execute.assert_not_called()
        self.logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_reflect_sends_reset_then_script(self):
        host = AsyncMock()
        session = ColordinateSession(host, MemoryBuffer(text="Normal: {}"))
        await session.reflect()
        script = host.execute.call_args.args[0]
        lines = script.split("\n")
        assert lines[0] == "if exists('syntax_on')"
        assert "let g:colors_name = 'colordinate'" in lines
        assert lines[-1] == "hi! Normal guifg=None guibg=None gui=NONE"

    @pytest.mark.asyncio
    async def test_jump_to_named_group(self):
        await self.session.load()
        lines = self.session.buffer.get_text().split("\n")
        lineno = await self.session.jump("Comment")
        assert lines[lineno - 1] == "Comment:"

    @pytest.mark.asyncio
    async def test_jump_matches_whole_words(self):
        self.session.buffer = MemoryBuffer(text="CommentX: {}\nComment: {}\n")
        assert await self.session.jump("Comment") == 2

    @pytest.mark.asyncio
    async def test_jump_uses_cursor_group_and_loads(self):
        self.host.cursor = "SpecialComment"
        lineno = await self.session.jump()
        assert self.session.buffer is not None
        assert "SpecialComment" in self.session.buffer.get_text().split("\n")[lineno - 1]

    @pytest.mark.asyncio
    async def test_jump_not_found(self):
        await self.session.load()
        assert await self.session.jump("Missing") is None

    def test_save_requires_buffer(self):
        with pytest.raises(SessionError):
            self.session.save("mytheme")

    def test_save_writes_colorscheme(self, tmp_path):
        config = ColordinateConfig(save_path=str(tmp_path))
        session = ColordinateSession(self.host, MemoryBuffer(text=DOCUMENT), config)
        path = session.save("mytheme")
        assert path == tmp_path / "mytheme.vim"
        content = path.read_text()
        assert "let g:colors_name = 'mytheme'" in content
        assert "hi! link SpecialComment Comment" in content

    def test_save_declined_overwrite(self, tmp_path):
        config = ColordinateConfig(save_path=str(tmp_path))
        (tmp_path / "mytheme.vim").write_text("old")
        session = ColordinateSession(self.host, MemoryBuffer(text=DOCUMENT), config)
        confirm = Mock(return_value=False)
        assert session.save("mytheme", confirm=confirm) is None
        assert (tmp_path / "mytheme.vim").read_text() == "old"
        assert "already exists" in confirm.call_args.args[0]

    def test_save_accepted_overwrite(self, tmp_path):
        config = ColordinateConfig(save_path=str(tmp_path))
        (tmp_path / "mytheme.vim").write_text("old")
        session = ColordinateSession(self.host, MemoryBuffer(text=DOCUMENT), config)
        assert session.save("mytheme", confirm=lambda msg: True) is not None
        assert (tmp_path / "mytheme.vim").read_text() != "old"

    def test_save_invalid_document(self, tmp_path):
        config = ColordinateConfig(save_path=str(tmp_path))
        session = ColordinateSession(self.host, MemoryBuffer(text="Normal: red"), config)
        with pytest.raises(ValidationError):
            session.save("mytheme")
        assert not (tmp_path / "mytheme.vim").exists()
