import pytest

from usbmoded.resolv import ConnectionDataError, IpForwardData, read_resolv_conf


def write(tmp_path, text):
    path = tmp_path / "resolv.conf"
    path.write_text(text)
    return str(path)


def test_two_nameservers(tmp_path):
    path = write(tmp_path, "nameserver 10.0.0.1\nnameserver 10.0.0.2\n")
    data = read_resolv_conf(path)
    assert (data.dns1, data.dns2) == ("10.0.0.1", "10.0.0.2")


def test_single_nameserver_is_duplicated(tmp_path):
    path = write(tmp_path, "nameserver 10.0.0.1\n")
    data = read_resolv_conf(path)
    assert data.dns2 == data.dns1 == "10.0.0.1"


def test_only_first_two_nameservers_used(tmp_path):
    path = write(
        tmp_path,
        "nameserver 10.0.0.1\nnameserver 10.0.0.2\nnameserver 10.0.0.3\n",
    )
    data = read_resolv_conf(path)
    assert (data.dns1, data.dns2) == ("10.0.0.1", "10.0.0.2")


def test_comments_and_other_lines_skipped(tmp_path):
    path = write(
        tmp_path,
        "# generated\n\nsearch example.com\nnameserver 10.0.0.9\n",
    )
    data = read_resolv_conf(path)
    assert data.dns1 == "10.0.0.9"


def test_nat_interface_not_set(tmp_path):
    path = write(tmp_path, "nameserver 10.0.0.1\n")
    assert read_resolv_conf(path).nat_interface is None


def test_nameserver_without_address_ignored(tmp_path):
    path = write(tmp_path, "nameserver\nnameserver 10.0.0.4\n")
    data = read_resolv_conf(path)
    assert (data.dns1, data.dns2) == ("10.0.0.4", "10.0.0.4")


def test_trailing_fields_ignored(tmp_path):
    path = write(tmp_path, "nameserver 10.0.0.5 extra stuff\n")
    assert read_resolv_conf(path).dns1 == "10.0.0.5"


def test_no_nameserver_raises(tmp_path):
    path = write(tmp_path, "# nothing\nsearch example.com\n")
    with pytest.raises(ConnectionDataError):
        read_resolv_conf(path)


def test_tab_separated_not_recognised(tmp_path):
    path = write(tmp_path, "nameserver\t10.0.0.1\n")
    with pytest.raises(ConnectionDataError):
        read_resolv_conf(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConnectionDataError):
        read_resolv_conf(str(tmp_path / "absent"))


def test_clear_forgets_values():
    data = IpForwardData("10.0.0.1", "10.0.0.2", "rmnet0")
    data.clear()
    assert data == IpForwardData()