"""
Unit tests for CLI commands.

Tests the command-line interface for admin operations and the TV export.
"""
import io

import httpx
import pytest
from unittest.mock import patch, MagicMock
from PIL import Image
from sqlalchemy.orm import Session

from app.cli import create_admin, main, reset_password, tv_export
from app.display.menu_client import MenuClient
from app.models import Session as UserSession
from app.models.user import User
from tests.factories import create_session


# =============================================================================
# create_admin Tests
# =============================================================================

class TestCreateAdmin:
    """Tests for the create_admin function."""

    def test_create_admin_success(self, db: Session):
        with patch('app.cli.SessionLocal', return_value=db), \
             patch('builtins.print') as mock_print:

            create_admin("owner2", "securepassword123")

            user = db.query(User).filter(User.username == "owner2").first()
            assert user is not None
            assert user.is_admin is True

            mock_print.assert_called_with("Admin user created successfully: owner2")

    def test_create_admin_duplicate_username(self, db: Session, test_user):
        with patch('app.cli.SessionLocal', return_value=db), \
             patch('builtins.print') as mock_print, \
             pytest.raises(SystemExit) as exc_info:

            create_admin(test_user.username, "newpassword123")

        assert exc_info.value.code == 1
        assert "already exists" in str(mock_print.call_args)

    def test_create_admin_password_too_short(self, db: Session):
        with patch('app.cli.SessionLocal', return_value=db), \
             patch('builtins.print') as mock_print, \
             pytest.raises(SystemExit) as exc_info:

            create_admin("owner2", "short")

        assert exc_info.value.code == 1
        assert "at least 8 characters" in str(mock_print.call_args)

    def test_create_admin_prompts_for_password(self, db: Session):
        with patch('app.cli.SessionLocal', return_value=db), \
             patch('getpass.getpass', side_effect=["password123", "password123"]), \
             patch('builtins.print'):

            create_admin("prompted")

            assert db.query(User).filter(User.username == "prompted").first() is not None

    def test_create_admin_password_mismatch(self, db: Session):
        with patch('app.cli.SessionLocal', return_value=db), \
             patch('getpass.getpass', side_effect=["password123", "different456"]), \
             patch('builtins.print') as mock_print, \
             pytest.raises(SystemExit) as exc_info:

            create_admin("mismatch")

        assert exc_info.value.code == 1
        assert "do not match" in str(mock_print.call_args)

    def test_create_admin_password_hash_is_valid(self, db: Session):
        import bcrypt

        with patch('app.cli.SessionLocal', return_value=db), \
             patch('builtins.print'):

            create_admin("hashtest", "password123")

            user = db.query(User).filter(User.username == "hashtest").first()
            assert bcrypt.checkpw(
                "password123".encode('utf-8'),
                user.password_hash.encode('utf-8')
            )


# =============================================================================
# reset_password Tests
# =============================================================================

class TestResetPassword:
    def test_reset_password_signs_out_user(self, db: Session, test_user):
        create_session(db, test_user)
        create_session(db, test_user)
        user_id, username = test_user.id, test_user.username

        with patch('app.cli.SessionLocal', return_value=db), \
             patch('builtins.print') as mock_print:

            reset_password(username)

        printed = [str(call) for call in mock_print.call_args_list]
        assert any("Temporary password for staff" in line for line in printed)
        assert any("Signed out 2 session(s)" in line for line in printed)
        assert db.query(UserSession).filter(UserSession.user_id == user_id).count() == 0

    def test_reset_password_unknown_user(self, db: Session):
        with patch('app.cli.SessionLocal', return_value=db), \
             patch('builtins.print') as mock_print, \
             pytest.raises(SystemExit) as exc_info:

            reset_password("ghost")

        assert exc_info.value.code == 1
        assert "not found" in str(mock_print.call_args)


# =============================================================================
# tv_export Tests
# =============================================================================

DISPLAY_MENU = {
    "date": "2024-01-15",
    "soups": [{"id": "s6", "name": "Black Angus Beef Chilli", "type": "soup"}, None, None, None, None, None],
    "specials": {"panini": None, "sandwich": None, "salad": None, "entree": None},
    "isPublished": True,
}


def fake_client(status_code=200, body=None):
    def handler(request):
        return httpx.Response(status_code, json=body if body is not None else DISPLAY_MENU)

    return lambda base_url: MenuClient(base_url, transport=httpx.MockTransport(handler))


class TestTvExport:
    def test_writes_png(self, tmp_path):
        output = tmp_path / "menu.png"

        with patch('app.cli.MenuClient', fake_client()), \
             patch('builtins.print'):

            tv_export("http://menu.test", "2024-01-15", str(output))

        with Image.open(io.BytesIO(output.read_bytes())) as image:
            assert image.size == (1080, 1920)

    def test_unpublished_menu_exits(self, tmp_path):
        with patch('app.cli.MenuClient', fake_client(status_code=404, body={"detail": "Menu not published"})), \
             patch('builtins.print') as mock_print, \
             pytest.raises(SystemExit) as exc_info:

            tv_export("http://menu.test", "2024-01-15", str(tmp_path / "menu.png"))

        assert exc_info.value.code == 1
        assert "Could not fetch menu" in str(mock_print.call_args)
        assert not (tmp_path / "menu.png").exists()


# =============================================================================
# main() Tests
# =============================================================================

class TestMain:
    """Tests for the main CLI entry point."""

    def test_main_create_admin(self, db: Session):
        with patch('app.cli.SessionLocal', return_value=db), \
             patch('builtins.print'):

            main(['create-admin', '--username', 'cliadmin', '--password', 'password123'])

            user = db.query(User).filter(User.username == "cliadmin").first()
            assert user is not None
            assert user.is_admin is True

    def test_main_tv_export_passes_arguments(self):
        with patch('app.cli.tv_export') as mock_export:
            main(['tv-export', '--base-url', 'http://shop', '--date', '2024-01-15', '--output', 'x.png'])

        mock_export.assert_called_once_with('http://shop', '2024-01-15', 'x.png', None)

    def test_main_no_command_shows_help(self):
        with patch('builtins.print'), pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1

    def test_main_unknown_command(self):
        with pytest.raises(SystemExit) as exc_info:
            main(['unknown-command'])

        # argparse returns exit code 2 for invalid arguments
        assert exc_info.value.code == 2

    def test_main_create_admin_missing_username(self):
        with pytest.raises(SystemExit) as exc_info:
            main(['create-admin'])

        assert exc_info.value.code == 2

    def test_main_help(self):
        with pytest.raises(SystemExit) as exc_info:
            main(['--help'])

        assert exc_info.value.code == 0


# =============================================================================
# Database Session Cleanup Tests
# =============================================================================

class TestDatabaseCleanup:
    """Tests for proper database session cleanup."""

    def test_session_closed_on_success(self):
        mock_session = MagicMock()
        mock_session.query.return_value.filter.return_value.first.return_value = None

        with patch('app.cli.SessionLocal', return_value=mock_session), \
             patch('builtins.print'):

            create_admin("cleanup", "password123")

        mock_session.close.assert_called_once()

    def test_session_closed_on_error(self, test_user):
        mock_session = MagicMock()
        mock_session.query.return_value.filter.return_value.first.return_value = test_user

        with patch('app.cli.SessionLocal', return_value=mock_session), \
             patch('builtins.print'), \
             pytest.raises(SystemExit):

            create_admin(test_user.username, "password123")

        mock_session.close.assert_called_once()
