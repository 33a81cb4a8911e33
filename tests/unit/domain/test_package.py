"""Tests for domain package exports."""

from produto.domain.models import __all__ as models_all
from produto.domain.repositories import __all__ as repositories_all
from produto.domain.services import ProdutoService
from produto.domain.services import __all__ as services_all


def test_domain_models_exports():
    assert models_all == ["Produto"]


def test_domain_repositories_exports():
    assert sorted(repositories_all) == ["ProdutoRepository", "Repository"]


def test_produto_service_importable_from_package():
    assert services_all == ["ProdutoService"]
    assert ProdutoService.__name__ == "ProdutoService"
