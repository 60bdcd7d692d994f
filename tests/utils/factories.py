import uuid
from datetime import datetime

from faker import Faker
from sqlalchemy.orm import Session

from app.auth.models.user import User
from app.core.datetime_utils import utcnow
from app.marketplace.models import Ads, Engineer, Product, ProductStatus, Shop

fake = Faker()


def create_user_factory(
    db_session: Session,
    email: str | None = None,
    name: str | None = None,
    phone: str | None = None,
    role: str = "user",
    is_active: bool = True,
    created_at: datetime | None = None,
) -> User:
    """
    Factory function to create test users.

    Args:
        db_session: Database session
        email: User email (generates random if None)
        name: User name (generates random if None)
        phone: Phone number (generates random if None)
        role: "user" or "admin"
        is_active: Whether user is active
        created_at: Registration time, naive UTC (now if None)

    Returns:
        Created User instance
    """
    now = utcnow()
    user = User(
        id=uuid.uuid4(),
        email=email or fake.unique.email(),
        name=name or fake.name(),
        phone=phone or fake.numerify("77#######"),
        role=role,
        is_active=is_active,
        created_at=created_at or now,
        updated_at=created_at or now,
    )

    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)

    return user


def create_product_factory(
    db_session: Session,
    name: str | None = None,
    type: str = "Panel",
    governorate: str = "Sanaa",
    status: ProductStatus = ProductStatus.PENDING,
    price: float | None = None,
    user: User | None = None,
    created_at: datetime | None = None,
    updated_at: datetime | None = None,
) -> Product:
    now = utcnow()
    product = Product(
        id=uuid.uuid4(),
        name=name or fake.catch_phrase(),
        description=fake.sentence(),
        price=price if price is not None else round(fake.pyfloat(min_value=10, max_value=900), 2),
        type=type,
        governorate=governorate,
        status=status,
        user_id=user.id if user else None,
        created_at=created_at or now,
        updated_at=updated_at or created_at or now,
    )

    db_session.add(product)
    db_session.commit()
    db_session.refresh(product)

    return product


def create_engineer_factory(
    db_session: Session,
    name: str | None = None,
    is_verified: bool = False,
    is_active: bool = True,
    experience: int | None = None,
    notes: str | None = "Internal review note",
    added_by: User | None = None,
    created_at: datetime | None = None,
) -> Engineer:
    now = utcnow()
    engineer = Engineer(
        id=uuid.uuid4(),
        name=name or fake.name(),
        phone=fake.numerify("77#######"),
        email=fake.unique.email(),
        specialization="Solar installation",
        experience=experience if experience is not None else fake.random_int(0, 25),
        governorate="Aden",
        is_verified=is_verified,
        is_active=is_active,
        notes=notes,
        added_by_id=added_by.id if added_by else None,
        created_at=created_at or now,
        updated_at=created_at or now,
    )

    db_session.add(engineer)
    db_session.commit()
    db_session.refresh(engineer)

    return engineer


def create_shop_factory(
    db_session: Session,
    name: str | None = None,
    is_verified: bool = False,
    is_active: bool = True,
    rating: float | None = None,
    owner: User | None = None,
    added_by: User | None = None,
    created_at: datetime | None = None,
) -> Shop:
    now = utcnow()
    shop = Shop(
        id=uuid.uuid4(),
        name=name or fake.company(),
        phone=fake.numerify("77#######"),
        address=fake.street_address(),
        governorate="Taiz",
        rating=rating if rating is not None else round(fake.pyfloat(min_value=0, max_value=5), 1),
        is_verified=is_verified,
        is_active=is_active,
        owner_id=owner.id if owner else None,
        added_by_id=added_by.id if added_by else None,
        notes="Checked documents by phone",
        verification_documents=["license.pdf", "tax-card.pdf"],
        created_at=created_at or now,
        updated_at=created_at or now,
    )

    db_session.add(shop)
    db_session.commit()
    db_session.refresh(shop)

    return shop


def create_ad_factory(
    db_session: Session,
    title: str | None = None,
    active: bool = True,
    created_at: datetime | None = None,
) -> Ads:
    now = utcnow()
    ad = Ads(
        id=uuid.uuid4(),
        title=title or fake.catch_phrase(),
        description=fake.sentence(),
        image_url=fake.image_url(),
        link=fake.url(),
        active=active,
        created_at=created_at or now,
        updated_at=created_at or now,
    )

    db_session.add(ad)
    db_session.commit()
    db_session.refresh(ad)

    return ad
