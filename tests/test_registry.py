import pytest

from grassinvaders.registry import FileTypeRegistry, LoaderFlag, UnknownFileType


def test_combined_flags_reach_loader(tmp_path):
    path = tmp_path / "pic.xyz"
    path.write_bytes(b"data")
    reg = FileTypeRegistry()
    reg.register_loader(".xyz", lambda name, flags: flags)
    flags = LoaderFlag.KEEP_BITMAP_FORMAT | LoaderFlag.NO_PREMULTIPLIED_ALPHA
    assert reg.load(str(path), flags) == 0x0202


def test_load_by_extension(tmp_path):
    path = tmp_path / "pic.xyz"
    path.write_bytes(b"data")
    reg = FileTypeRegistry()
    reg.register_loader(".xyz", lambda name, flags: (name, flags))
    assert reg.load(str(path), LoaderFlag.KEEP_INDEX) == (str(path), 0x0800)


def test_extension_case_insensitive(tmp_path):
    path = tmp_path / "PIC.XYZ"
    path.write_bytes(b"data")
    reg = FileTypeRegistry()
    reg.register_loader(".Xyz", lambda name, flags: "loaded")
    assert reg.load(str(path)) == "loaded"


def test_load_unknown(tmp_path):
    path = tmp_path / "pic.abc"
    path.write_bytes(b"data")
    with pytest.raises(UnknownFileType):
        FileTypeRegistry().load(str(path))


def test_identifier_overrides_extension(tmp_path):
    path = tmp_path / "misnamed.abc"
    path.write_bytes(b"MAGICrest")
    reg = FileTypeRegistry()
    reg.register_identifier(".mag", lambda fp: fp.read(5) == b"MAGIC")
    reg.register_loader(".mag", lambda name, flags: "magic")
    reg.register_loader(".abc", lambda name, flags: "abc")
    assert reg.identify(str(path)) == ".mag"
    assert reg.load(str(path)) == "magic"


def test_identify_missing_file(tmp_path):
    reg = FileTypeRegistry()
    reg.register_identifier(".mag", lambda fp: True)
    assert reg.identify(str(tmp_path / "missing.mag")) is None


def test_identify_no_match(tmp_path):
    path = tmp_path / "f.bin"
    path.write_bytes(b"zz")
    reg = FileTypeRegistry()
    reg.register_identifier(".mag", lambda fp: fp.read(1) == b"M")
    assert reg.identify(str(path)) is None


def test_save_round_trip(tmp_path):
    reg = FileTypeRegistry()
    store = {}
    reg.register_saver(".xyz", lambda name, item: store.setdefault(name, item))
    target = str(tmp_path / "out.xyz")
    reg.save(target, [1, 2])
    assert store == {target: [1, 2]}


def test_save_unknown(tmp_path):
    with pytest.raises(UnknownFileType):
        FileTypeRegistry().save(str(tmp_path / "out.nope"), object())


def test_unregister(tmp_path):
    path = tmp_path / "pic.xyz"
    path.write_bytes(b"data")
    reg = FileTypeRegistry()
    reg.register_loader(".xyz", lambda name, flags: 1)
    reg.register_loader(".xyz", None)
    with pytest.raises(UnknownFileType):
        reg.load(str(path))


def test_unregister_absent():
    with pytest.raises(UnknownFileType):
        FileTypeRegistry().register_saver(".xyz", None)


@pytest.mark.parametrize("ext", ["xyz", ".", ""])
def test_bad_extension(ext):
    with pytest.raises(ValueError):
        FileTypeRegistry().register_loader(ext, lambda name, flags: 1)