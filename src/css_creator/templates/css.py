"""CSS block templates, one pure render function per element type.

Every block opens with a ``/* <Label>: <id> */`` comment and ends with a
blank line so blocks concatenate cleanly into a stylesheet.
"""
from __future__ import annotations

from string import Template
from typing import Mapping

PALETTE: tuple[str, ...] = ("#3a86ff", "#fb5607", "#8338ec", "#ff006e", "#ffbe0b")

DEFAULT_TEXT_COLOR = "#ffffff"
DEFAULT_BORDER_COLOR = "#ddd"

_BUTTON = Template("""\
/* Button: $id */
#$id {
    display: inline-block;
    padding: 12px 24px;
    background-color: $bg_color;
    color: $text_color;
    border: none;
    border-radius: var(--border-radius);
    font-size: 16px;
    font-weight: 600;
    cursor: pointer;
    transition: var(--transition);
    text-align: center;
    text-decoration: none;
    box-shadow: var(--box-shadow);
}

#$id:hover {
    transform: translateY(-2px);
    box-shadow: 0 6px 12px rgba(0, 0, 0, 0.15);
}

#$id:active {
    transform: translateY(0);
}

#$id:focus {
    outline: 2px solid ${bg_color}80;
    outline-offset: 2px;
}

""")

_INPUT = Template("""\
/* Input: $id */
#$id {
    width: 100%;
    max-width: 300px;
    padding: 10px 15px;
    border: 2px solid $border_color;
    border-radius: var(--border-radius);
    font-size: 16px;
    transition: var(--transition);
    background-color: white;
}

#$id:focus {
    border-color: var(--primary-color);
    box-shadow: 0 0 0 3px var(--primary-color)20;
    outline: none;
}

#$id::placeholder {
    color: #999;
}

""")

_CARD = Template("""\
/* Card: $id */
#$id {
    background-color: var(--card-bg);
    border-radius: var(--border-radius);
    box-shadow: var(--box-shadow);
    padding: 24px;
    margin: 16px 0;
    transition: var(--transition);
}

#$id:hover {
    box-shadow: 0 8px 16px rgba(0, 0, 0, 0.1);
}

#$id .card-header {
    font-size: 20px;
    font-weight: 700;
    margin-bottom: 16px;
    color: var(--text-color);
}

#$id .card-body {
    color: #666;
    line-height: 1.8;
}

#$id .card-footer {
    margin-top: 20px;
    padding-top: 16px;
    border-top: 1px solid #eee;
}

""")

_NAVBAR = Template("""\
/* Navbar: $id */
#$id {
    background-color: var(--card-bg);
    box-shadow: var(--box-shadow);
    padding: 0 24px;
    position: sticky;
    top: 0;
    z-index: 1000;
}

#$id .navbar-container {
    display: flex;
    justify-content: space-between;
    align-items: center;
    max-width: 1200px;
    margin: 0 auto;
    padding: 16px 0;
}

#$id .navbar-brand {
    font-size: 24px;
    font-weight: 700;
    color: var(--primary-color);
    text-decoration: none;
}

#$id .navbar-menu {
    display: flex;
    list-style: none;
    gap: 24px;
}

#$id .navbar-menu a {
    text-decoration: none;
    color: var(--text-color);
    font-weight: 500;
    transition: var(--transition);
    padding: 8px 0;
}

#$id .navbar-menu a:hover {
    color: var(--primary-color);
}

""")

_FOOTER = Template("""\
/* Footer: $id */
#$id {
    background-color: #2c3e50;
    color: #ecf0f1;
    padding: 40px 0;
    margin-top: 60px;
}

#$id .footer-content {
    max-width: 1200px;
    margin: 0 auto;
    padding: 0 24px;
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(250px, 1fr));
    gap: 40px;
}

#$id .footer-section h3 {
    color: white;
    margin-bottom: 20px;
    font-size: 20px;
}

#$id .footer-section p {
    line-height: 1.8;
    opacity: 0.9;
}

#$id .footer-bottom {
    text-align: center;
    padding-top: 20px;
    margin-top: 40px;
    border-top: 1px solid rgba(255, 255, 255, 0.1);
    opacity: 0.7;
}

""")

_HEADER = Template("""\
/* Header: $id */
#$id {
    background: linear-gradient(135deg, var(--primary-color), var(--accent-color));
    color: white;
    padding: 80px 0;
    text-align: center;
}

#$id .header-content {
    max-width: 800px;
    margin: 0 auto;
    padding: 0 24px;
}

#$id h1 {
    font-size: 48px;
    margin-bottom: 24px;
    font-weight: 800;
}

#$id .subtitle {
    font-size: 20px;
    opacity: 0.9;
    margin-bottom: 40px;
}

""")

_SIDEBAR = Template("""\
/* Sidebar: $id */
#$id {
    background-color: var(--card-bg);
    width: 280px;
    height: 100vh;
    position: fixed;
    left: 0;
    top: 0;
    box-shadow: var(--box-shadow);
    transition: var(--transition);
    z-index: 100;
}

#$id .sidebar-header {
    padding: 24px;
    border-bottom: 1px solid #eee;
    text-align: center;
}

#$id .sidebar-menu {
    list-style: none;
    padding: 0;
}

#$id .sidebar-menu li {
    border-bottom: 1px solid #f5f5f5;
}

#$id .sidebar-menu a {
    display: block;
    padding: 16px 24px;
    color: var(--text-color);
    text-decoration: none;
    transition: var(--transition);
}

#$id .sidebar-menu a:hover {
    background-color: #f8f9fa;
    padding-left: 28px;
    color: var(--primary-color);
}

""")


def render_button(element_id: str, properties: Mapping[str, str]) -> str:
    return _BUTTON.substitute(
        id=element_id,
        bg_color=properties.get("bg_color", PALETTE[0]),
        text_color=properties.get("text_color", DEFAULT_TEXT_COLOR),
    )


def render_input(element_id: str, properties: Mapping[str, str]) -> str:
    return _INPUT.substitute(
        id=element_id,
        border_color=properties.get("border_color", DEFAULT_BORDER_COLOR),
    )


def render_card(element_id: str, properties: Mapping[str, str]) -> str:
    return _CARD.substitute(id=element_id)


def render_navbar(element_id: str, properties: Mapping[str, str]) -> str:
    return _NAVBAR.substitute(id=element_id)


def render_footer(element_id: str, properties: Mapping[str, str]) -> str:
    return _FOOTER.substitute(id=element_id)


def render_header(element_id: str, properties: Mapping[str, str]) -> str:
    return _HEADER.substitute(id=element_id)


def render_sidebar(element_id: str, properties: Mapping[str, str]) -> str:
    return _SIDEBAR.substitute(id=element_id)
