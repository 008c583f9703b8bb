"""
Kakinada CCC — App Shell

The HTML document the UI is mounted into. The rendered component tree
goes into a single container element; a shell without that container is
a fatal startup error.
"""
from typing import Callable

from kakinada_ccc.mock_data import COLORS


class MountError(RuntimeError):
    """The app shell has no mount container."""


APP_SHELL = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<meta name="description" content="Kakinada CCC — smart policing command center prototype">
<title>Kakinada CCC — Command Center</title>
<script src="https://cdn.tailwindcss.com"></script>
<style>
  :root { --primary: %(primary)s; --accent: %(accent)s; --bg: %(bg)s; --text: %(text)s; }
  body { background: var(--bg); color: var(--text); }
  nav form button { width: 100%%; text-align: left; }
</style>
</head>
<body>
<div id="root"></div>
</body>
</html>""" % COLORS


def _container(mount_id: str) -> str:
    return f'<div id="{mount_id}"></div>'


def ensure_mount_target(shell: str, mount_id: str = "root") -> None:
    if _container(mount_id) not in shell:
        raise MountError(f"Root element with id '{mount_id}' not found in app shell")


def mount(shell: str, render: Callable[[], str], mount_id: str = "root") -> str:
    """Render the component tree into the shell's mount container.

    The container is checked before ``render`` runs, so a broken shell
    never produces a partial page.
    """
    ensure_mount_target(shell, mount_id)
    body = render()
    return shell.replace(_container(mount_id), f'<div id="{mount_id}">{body}</div>', 1)
