import os
import re
import logging
from datetime import datetime, timezone
import yaml

from cms.exceptions import ContentFileError

logger = logging.getLogger('cms')

FRONT_MATTER_RE = re.compile(r'\A---[ \t]*\n(.*?)^---[ \t]*$\n?(.*)\Z', re.MULTILINE | re.DOTALL)

# 2024-01-31, 2024-01-31-1530 or 2024-01-31-153045
DATE_PREFIX_RE = re.compile(r'^(\d{4})-(\d{2})-(\d{2})(?:-(\d{2})(\d{2})(\d{2})?)?$')


def safe_join_path(root, *parts):
    """
    Safely join path components and validate they stay within root.

    Args:
        root: Directory the result must stay inside
        *parts: Path components to join

    Returns:
        str: Validated absolute path

    Raises:
        ValueError: If path would escape root
    """
    path = os.path.join(root, *parts)
    abs_path = os.path.abspath(path)
    abs_root = os.path.abspath(root)

    if abs_path != abs_root and not abs_path.startswith(abs_root + os.sep):
        logger.warning(f"Path traversal attempt detected: {path}")
        raise ValueError(f"Invalid path: {path}")

    return abs_path


def read_text(file_path):
    try:
        with open(file_path, 'r', encoding='utf-8-sig') as f:
            return f.read().replace('\r\n', '\n')
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}")
        raise ContentFileError(file_path, f"unreadable ({e})") from e


def parse_yaml(text, file_path='<string>'):
    """
    Parse a YAML document into a dict.

    Empty documents give an empty dict. Anything that is not a mapping at
    the top level is rejected.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML in {file_path}: {e}")
        raise ContentFileError(file_path, f"invalid YAML ({e})") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ContentFileError(file_path, f"expected a mapping, got {type(data).__name__}")
    return data


def load_yaml(file_path):
    """Load a YAML file into a dict."""
    return parse_yaml(read_text(file_path), file_path)


def parse_front_matter(text, file_path='<string>'):
    """
    Split a Markdown document into its YAML front matter and body.

    Returns:
        tuple: (metadata dict, body str)
    """
    match = FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text

    metadata = parse_yaml(match.group(1), file_path)
    return metadata, match.group(2)


def load_front_matter(file_path):
    """Load a Markdown file with YAML front matter."""
    return parse_front_matter(read_text(file_path), file_path)


def parse_date_prefix(prefix):
    """
    Parse a dated filename prefix into an aware datetime.

    Returns:
        datetime or None: None if the prefix is not a date
    """
    match = DATE_PREFIX_RE.match(prefix)
    if not match:
        return None

    year, month, day, hour, minute, second = match.groups()
    try:
        return datetime(
            int(year), int(month), int(day),
            int(hour or 0), int(minute or 0), int(second or 0),
            tzinfo=timezone.utc,
        )
    except ValueError:
        return None


def split_entry_filename(filename):
    """
    Split an entry filename into (slug, date, order).

    ``2024-01-31.hello.md`` gives a date, ``3.about.md`` gives an order and
    ``hello.md`` gives neither.
    """
    stem = filename[:-3] if filename.endswith('.md') else filename
    if '.' not in stem:
        return stem, None, None

    prefix, slug = stem.split('.', 1)
    date = parse_date_prefix(prefix)
    if date is not None:
        return slug, date, None
    if prefix.isdigit():
        return slug, None, int(prefix)
    return stem, None, None


TRUE_STRINGS = {'true', 'yes', 'on', '1'}
FALSE_STRINGS = {'false', 'no', 'off', '0'}


def parse_flag(value, default, file_path='<string>', key='flag'):
    """
    Read a boolean front matter value.

    Quoted spellings such as ``'false'`` or ``'no'`` are understood.
    Anything unrecognised is logged and replaced by the default.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    logger.warning(f"Unrecognised {key} value {value!r} in {file_path}, using {default}")
    return default


def path_to_handle(relative_path, extension):
    """Turn ``a/b/c.yaml`` into ``a.b.c``."""
    if relative_path.endswith('.' + extension):
        relative_path = relative_path[:-(len(extension) + 1)]
    return relative_path.replace(os.sep, '.').replace('/', '.')


def namespace_and_handle(relative_path, extension='yaml'):
    """
    Derive a blueprint's (namespace, handle) from its relative path.

    ``articles/seo.yaml`` gives ('articles', 'seo'); ``seo.yaml`` gives
    (None, 'seo'); deeper paths join their directories with dots.
    """
    parts = path_to_handle(relative_path, extension).split('.')
    handle = parts.pop()
    namespace = '.'.join(parts)
    return (namespace or None), handle
