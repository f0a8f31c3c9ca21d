"""Tests for TutorProfileRepository."""

from sqlmodel import select

from skillbridge.core.database.entities import TutorCategoryLink
from skillbridge.core.database.repositories import TutorProfileRepository


async def test_get_by_user_id(db_session, people):
    repo = TutorProfileRepository(db_session)

    profile = await repo.get_by_user_id(people["tutor"].id)

    assert profile.id == people["profile"].id
    assert await repo.get_by_user_id(people["student"].id) is None


async def test_get_by_user_ids(db_session, people):
    profiles = await TutorProfileRepository(db_session).get_by_user_ids(
        [people["tutor"].id, people["other_tutor"].id, people["student"].id]
    )

    assert set(profiles) == {people["tutor"].id, people["other_tutor"].id}


async def test_set_categories_replaces_links(db_session, people, categories):
    repo = TutorProfileRepository(db_session)
    profile = people["profile"]

    await repo.set_categories(profile, [categories["programming"].id, categories["mathematics"].id])
    await db_session.commit()
    await repo.set_categories(profile, [categories["music"].id, categories["music"].id])
    await db_session.commit()

    links = (await db_session.execute(select(TutorCategoryLink))).scalars().all()
    assert [(link.tutor_profile_id, link.category_id) for link in links] == [(profile.id, categories["music"].id)]


async def test_categories_for_orders_by_name(db_session, people, categories):
    repo = TutorProfileRepository(db_session)
    profile, other = people["profile"], people["other_profile"]
    await repo.set_categories(profile, [categories["programming"].id, categories["mathematics"].id])
    await db_session.commit()

    linked = await repo.categories_for([profile.id, other.id])

    assert [c.name for c in linked[profile.id]] == ["Mathematics", "Programming"]
    assert linked[other.id] == []
    assert await repo.categories_for([]) == {}


async def test_apply_rating(db_session, people):
    repo = TutorProfileRepository(db_session)
    profile = people["profile"]
    before = profile.updated_at

    await repo.apply_rating(profile, 4.5, 2)
    await db_session.commit()

    stored = await repo.get_by_id(profile.id)
    assert stored.rating == 4.5
    assert stored.review_count == 2
    assert stored.updated_at >= before


async def test_count_with_bookings(db_session, people, add_booking):
    repo = TutorProfileRepository(db_session)
    assert await repo.count_with_bookings() == 0

    await add_booking(people["student"], people["tutor"])
    await add_booking(people["student"], people["tutor"])

    assert await repo.count_with_bookings() == 1
