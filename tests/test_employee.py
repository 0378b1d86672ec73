from treko.models.employee import Funcionario


def test_password_is_stored_as_bcrypt_hash():
    f = Funcionario(codigo="7", nome="Ana")
    f.set_password("segredo")
    assert f.hashed_password.startswith("$2")
    assert "segredo" not in f.hashed_password
    assert f.verify_password("segredo")
    assert not f.verify_password("Segredo")


def test_each_hash_gets_its_own_salt():
    a, b = Funcionario(codigo="1", nome="A"), Funcionario(codigo="2", nome="B")
    a.set_password("igual")
    b.set_password("igual")
    assert a.hashed_password != b.hashed_password


def test_long_password_and_unknown_hash_format():
    f = Funcionario(codigo="8", nome="Rui")
    f.set_password("x" * 100)
    assert f.verify_password("x" * 100)

    f.hashed_password = "not-a-bcrypt-hash"
    assert f.verify_password("x") is False
