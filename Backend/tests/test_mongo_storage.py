# tests/test_mongo_storage.py
"""
MongoDB adapters against a live server.

Skipped unless MONGODB_TEST_URL points at a disposable database.
"""
import os

import pytest

from devport.core.exceptions import ValidationError
from devport.models import FileCreate, PageCreate, PortfolioCreate, ProjectCreate, SectionCreate

MONGODB_TEST_URL = os.getenv("MONGODB_TEST_URL")

pytestmark = pytest.mark.skipif(not MONGODB_TEST_URL, reason="MONGODB_TEST_URL not set")


@pytest.fixture
async def mongo():
    from beanie import init_beanie
    from motor.motor_asyncio import AsyncIOMotorClient

    from devport.storage.documents import DOCUMENT_MODELS
    from devport.storage.mongo import MongoPlaygroundStorage, MongoPortfolioStorage

    client = AsyncIOMotorClient(MONGODB_TEST_URL, serverSelectionTimeoutMS=5000)
    db = client.get_default_database()
    await client.drop_database(db.name)
    await init_beanie(database=db, document_models=DOCUMENT_MODELS)

    playground = MongoPlaygroundStorage()
    await playground.seed_demo_user(1)
    yield playground, MongoPortfolioStorage()

    await client.drop_database(db.name)
    client.close()


@pytest.mark.anyio
async def test_project_files_and_cascade(mongo):
    playground, _ = mongo
    assert (await playground.get_user(1)).username == "demo"

    project = await playground.create_project(1, ProjectCreate(name="p"))
    await playground.create_file(project.id, FileCreate(name="a", path="/a"))
    with pytest.raises(ValidationError):
        await playground.create_file(project.id, FileCreate(name="a", path="/a"))

    assert await playground.delete_project(project.id) is True
    assert await playground.get_files_by_project_id(project.id) == []


@pytest.mark.anyio
async def test_home_page_and_reorder(mongo):
    _, portfolios = mongo
    portfolio = await portfolios.create_portfolio("u1", PortfolioCreate(title="p", domain="Mongo.Example.com"))
    assert (await portfolios.get_portfolio_by_domain("mongo.example.com")).id == portfolio.id

    home = await portfolios.create_page(portfolio.id, PageCreate(title="Home", is_home_page=True))
    other = await portfolios.create_page(portfolio.id, PageCreate(title="Other", is_home_page=True))
    assert (await portfolios.get_page(home.id)).is_home_page is False
    assert (await portfolios.get_page(other.id)).is_home_page is True

    a = await portfolios.create_section(other.id, SectionCreate(type="hero", order=0))
    b = await portfolios.create_section(other.id, SectionCreate(type="text", order=1))
    await portfolios.reorder_sections(other.id, [b.id, a.id])
    assert [s.id for s in await portfolios.get_page_sections(other.id)] == [b.id, a.id]

    assert await portfolios.delete_portfolio(portfolio.id) is True
    assert await portfolios.get_page_sections(other.id) == []
