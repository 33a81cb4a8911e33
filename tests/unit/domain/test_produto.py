"""Tests for produto/domain/models/produto.py."""

import pytest
from pydantic import ValidationError

from produto.domain.models import Produto


def test_produto_construction():
    p = Produto(id=1, nome="Café Pelé", preco=19.50)
    assert p.nome == "Café Pelé"
    assert p.preco == 19.50


def test_produto_nome_accepts_none_explicitly():
    assert Produto(id=2, nome=None, preco=20.49).nome is None


def test_produto_nome_defaults_to_none():
    assert Produto(id=1, preco=1.0).nome is None


def test_produto_accepts_blank_nome_and_non_positive_preco():
    # business rules live in ProdutoService, not the model
    p = Produto(id=1, nome=" ", preco=-1.0)
    assert p.preco == -1.0


def test_produto_requires_preco():
    with pytest.raises(ValidationError):
        Produto(id=1, nome="Café")


def test_produto_is_frozen():
    p = Produto(id=1, nome="Café", preco=1.0)
    with pytest.raises(ValidationError):
        p.preco = 2.0  # type: ignore[misc]


def test_produto_equality_by_value():
    assert Produto(id=1, nome="A", preco=1.0) == Produto(id=1, nome="A", preco=1.0)
