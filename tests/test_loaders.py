from __future__ import annotations

from pathlib import Path

import pytest

from resx_to_json.loaders import (
    ResxLoadError,
    discover_bundles,
    load_bundles,
    parse_resx,
    split_resource_name,
)
from resx_to_json.logger import ConverterLogger
from resx_to_json.models import INVARIANT_CULTURE, Culture, Severity


def test_parse_resx_reads_string_values_in_order(tmp_path, write_resx):
    path = write_resx(tmp_path / "Strings.resx", {"B": "two", "A": "one & <more>"})

    assert list(parse_resx(path).items()) == [("B", "two"), ("A", "one & <more>")]


def test_parse_resx_skips_typed_entries_and_defaults_empty_values(tmp_path):
    path = tmp_path / "Strings.resx"
    path.write_text(
        """<?xml version="1.0" encoding="utf-8"?>
<root>
  <data name="Logo" type="System.Resources.ResXFileRef, System.Windows.Forms">
    <value>logo.png;System.Drawing.Bitmap</value>
  </data>
  <data name="Empty" xml:space="preserve">
    <value />
  </data>
  <data name="Title" xml:space="preserve">
    <value>Hello</value>
    <comment>shown in the header</comment>
  </data>
</root>
""",
        encoding="utf-8",
    )

    assert parse_resx(path) == {"Empty": "", "Title": "Hello"}


def test_parse_resx_rejects_malformed_xml(tmp_path):
    path = tmp_path / "Broken.resx"
    path.write_text("<root><data name='x'>", encoding="utf-8")

    with pytest.raises(ResxLoadError):
        parse_resx(path)


@pytest.mark.parametrize(
    ("file_name", "base_name", "culture"),
    [
        ("Strings.resx", "Strings", INVARIANT_CULTURE),
        ("Strings.fr-FR.resx", "Strings", Culture.parse("fr-FR")),
        ("Strings.de.resx", "Strings", Culture.parse("de")),
        ("App.Strings.resx", "App.Strings", INVARIANT_CULTURE),
        ("App.Strings.ru.resx", "App.Strings", Culture.parse("ru")),
        ("Common.UI.resx", "Common.UI", INVARIANT_CULTURE),
        ("Messages.old.resx", "Messages.old", INVARIANT_CULTURE),
        ("Strings.zh-Hant-TW.resx", "Strings", Culture.parse("zh-Hant-TW")),
    ],
)
def test_split_resource_name(file_name, base_name, culture):
    assert split_resource_name(Path(file_name)) == (base_name, culture)


def test_load_bundles_groups_by_base_name(tmp_path, write_resx):
    files = [
        write_resx(tmp_path / "Strings.resx", {"Hello": "Hi"}),
        write_resx(tmp_path / "Strings.fr.resx", {"Hello": "Salut"}),
        write_resx(tmp_path / "Errors.resx", {"Oops": "Oops"}),
    ]
    logger = ConverterLogger()

    bundles = load_bundles(files, logger)

    assert list(bundles) == ["Strings", "Errors"]
    assert bundles["Strings"].cultures == [INVARIANT_CULTURE, Culture.parse("fr")]
    assert bundles["Strings"].get_values(Culture.parse("fr")) == {"Hello": "Salut"}
    assert len(logger.messages(Severity.TRACE)) == 3


def test_load_bundles_keeps_dotted_base_names_apart(tmp_path, write_resx):
    files = [
        write_resx(tmp_path / "Common.resx", {"Ok": "OK"}),
        write_resx(tmp_path / "Common.UI.resx", {"Title": "Main"}),
    ]

    bundles = load_bundles(files, ConverterLogger())

    assert list(bundles) == ["Common", "Common.UI"]
    assert bundles["Common"].cultures == [INVARIANT_CULTURE]
    assert bundles["Common.UI"].get_values() == {"Title": "Main"}


def test_load_bundles_warns_about_missing_files(tmp_path):
    logger = ConverterLogger()

    assert load_bundles([tmp_path / "Missing.resx"], logger) == {}
    assert logger.messages(Severity.WARNING)


def test_load_bundles_ignores_other_extensions(tmp_path):
    other = tmp_path / "notes.txt"
    other.write_text("hello", encoding="utf-8")

    assert load_bundles([other], ConverterLogger()) == {}


def test_discover_bundles_recursive(tmp_path, write_resx):
    write_resx(tmp_path / "Strings.resx", {"Hello": "Hi"})
    write_resx(tmp_path / "nested" / "Labels.resx", {"Name": "Name"})

    flat = discover_bundles([tmp_path], recursive=False, logger=ConverterLogger())
    deep = discover_bundles([tmp_path], recursive=True, logger=ConverterLogger())

    assert list(flat) == ["Strings"]
    assert sorted(deep) == ["Labels", "Strings"]


def test_discover_bundles_warns_about_missing_folder(tmp_path):
    logger = ConverterLogger()

    assert discover_bundles([tmp_path / "nope"], recursive=False, logger=logger) == {}
    assert logger.messages(Severity.WARNING)
