"""
Tests for slugged content CRUD in services.content_service and
services.blog_service.
"""

import pytest

from core.errors import (
    ContentNotFoundError,
    ContentValidationError,
    SlugConflictError,
    SlugGenerationError,
)
from models.content import BlogPost
from services import (
    BlogPostService,
    CaseStudyService,
    CategoryService,
    OfferingService,
)


class TestCreate:
    """Slug assignment on create."""

    def test_slug_from_name(self, app) -> None:
        category = CategoryService().create({'name': '  Tech News  ', 'description': 'Latest'})

        assert category.name == 'Tech News'
        assert category.slug == 'tech-news'
        assert category.description == 'Latest'

    def test_duplicate_names_get_suffixes(self, app) -> None:
        service = CategoryService()
        slugs = [service.create({'name': 'Tech News'}).slug for _ in range(3)]
        assert slugs == ['tech-news', 'tech-news-1', 'tech-news-2']

    def test_slug_uniqueness_is_per_type(self, app) -> None:
        assert CategoryService().create({'name': 'Consulting'}).slug == 'consulting'
        assert OfferingService().create({'title': 'Consulting'}).slug == 'consulting'

    def test_requested_slug_ignored_on_create(self, app) -> None:
        category = CategoryService().create({'name': 'Design', 'slug': 'something-else'})
        assert category.slug == 'design'

    @pytest.mark.parametrize('name', [None, '', '   ', 42])
    def test_name_required(self, app, name) -> None:
        with pytest.raises(ContentValidationError):
            CategoryService().create({'name': name})

    def test_name_without_slug_characters(self, app) -> None:
        with pytest.raises(ContentValidationError):
            CategoryService().create({'name': '!!!'})

    def test_slug_cap(self, app) -> None:
        app.config['SLUG_MAX_ATTEMPTS'] = 2
        service = CategoryService()
        service.create({'name': 'Busy'})
        service.create({'name': 'Busy'})

        with pytest.raises(SlugGenerationError):
            service.create({'name': 'Busy'})
        assert len(service.list()) == 2

    def test_missing_reference(self, app) -> None:
        with pytest.raises(ContentNotFoundError) as exc_info:
            CaseStudyService().create({'title': 'Clinic rollout', 'industry_id': 77})
        assert exc_info.value.details['resource_type'] == 'Industry'
        assert CaseStudyService().list() == []

    def test_case_study_with_industry(self, app, industry) -> None:
        study = CaseStudyService().create({'title': 'Clinic Rollout', 'industry_id': industry.id})
        assert study.slug == 'clinic-rollout'
        assert study.industry.name == 'Healthcare'
        assert study.published is False
        assert study.published_at is None


class TestUpdate:
    """Slug stability and explicit slugs on update."""

    def test_unchanged_name_keeps_custom_slug(self, app) -> None:
        service = CategoryService()
        category = service.create({'name': 'Design'})
        service.update(category.id, {'slug': 'visual-design'})

        updated = service.update(category.id, {'name': 'Design', 'description': 'New'})
        assert updated.slug == 'visual-design'
        assert updated.description == 'New'

    def test_name_change_regenerates_slug(self, app) -> None:
        service = CategoryService()
        service.create({'name': 'Branding'})
        category = service.create({'name': 'Design'})

        assert service.update(category.id, {'name': 'Branding'}).slug == 'branding-1'

    def test_requested_slug_conflict(self, app) -> None:
        service = CategoryService()
        service.create({'name': 'Design'})
        other = service.create({'name': 'Marketing'})

        with pytest.raises(SlugConflictError):
            service.update(other.id, {'slug': 'design', 'description': 'changed'})

        assert service.get(other.id).slug == 'marketing'
        assert service.get(other.id).description is None

    def test_same_slug_requested(self, app) -> None:
        service = CategoryService()
        category = service.create({'name': 'Design'})
        assert service.update(category.id, {'slug': 'design'}).slug == 'design'

    def test_partial_update_keeps_other_fields(self, app, author) -> None:
        service = BlogPostService()
        post = service.create({'title': 'Hello', 'description': 'Intro', 'author_id': author.id})

        updated = service.update(post.id, {'content': 'Body'})
        assert updated.description == 'Intro'
        assert updated.author_id == author.id
        assert updated.content == 'Body'

    def test_empty_name_rejected(self, app) -> None:
        service = CategoryService()
        category = service.create({'name': 'Design'})
        with pytest.raises(ContentValidationError):
            service.update(category.id, {'name': '  '})

    def test_missing_record(self, app) -> None:
        with pytest.raises(ContentNotFoundError):
            CategoryService().update(321, {'name': 'Ghost'})


class TestPublication:
    """published_at follows the published flag."""

    def test_publish_on_create(self, app) -> None:
        post = BlogPostService().create({'title': 'Launch', 'published': True})
        assert post.published is True
        assert post.published_at is not None

    def test_publish_and_unpublish(self, app, post) -> None:
        service = BlogPostService()

        published = service.update(post.id, {'published': True})
        first_published_at = published.published_at
        assert first_published_at is not None

        republished = service.update(post.id, {'published': True, 'content': 'Edited'})
        assert republished.published_at == first_published_at

        unpublished = service.update(post.id, {'published': False})
        assert unpublished.published is False
        assert unpublished.published_at is None


class TestBlogAssociations:
    """Association payloads go through the synchronizer."""

    def test_create_with_associations(self, app, author, categories) -> None:
        post = BlogPostService().create({
            'title': 'Shipping Flask Apps',
            'author_id': author.id,
            'category_ids': [categories[0].id],
            'tag_names': ['Flask', 'Deployment'],
            'gallery_images': [{'url': 'cover.jpg', 'alt_text': 'Cover'}],
        })

        assert [c.slug for c in post.categories] == ['engineering']
        assert [t.slug for t in post.tags] == ['deployment', 'flask']
        assert [i.url for i in post.gallery_images] == ['cover.jpg']

    def test_failed_sync_rolls_back_field_update(self, app, store, post) -> None:
        with pytest.raises(ContentNotFoundError):
            BlogPostService().update(post.id, {'title': 'Renamed', 'category_ids': [999]})

        post = store.get(BlogPost, post.id)
        assert post.title == 'Hello World'
        assert post.slug == 'hello-world'

    def test_failed_create_leaves_nothing(self, app, store) -> None:
        with pytest.raises(ContentValidationError):
            BlogPostService().create({'title': 'Broken', 'gallery_images': [{'url': ''}]})
        assert store.find_one(BlogPost, 'slug', 'broken') is None

    def test_missing_author(self, app) -> None:
        with pytest.raises(ContentNotFoundError):
            BlogPostService().create({'title': 'Orphan', 'author_id': 5})


class TestDeleteAndList:
    """Delete and listing order."""

    def test_delete(self, app) -> None:
        service = CategoryService()
        category = service.create({'name': 'Temporary'})
        service.delete(category.id)

        with pytest.raises(ContentNotFoundError):
            service.get(category.id)

    def test_delete_missing(self, app) -> None:
        with pytest.raises(ContentNotFoundError):
            CategoryService().delete(999)

    def test_delete_category_detaches_posts(self, app, store, post, categories) -> None:
        BlogPostService().update(post.id, {'category_ids': [categories[0].id]})
        CategoryService().delete(categories[0].id)
        assert store.get(BlogPost, post.id).categories == []

    def test_categories_listed_by_name(self, app) -> None:
        service = CategoryService()
        for name in ('Zeta', 'Alpha', 'Mu'):
            service.create({'name': name})
        assert [c.name for c in service.list()] == ['Alpha', 'Mu', 'Zeta']

    def test_posts_listed_newest_first(self, app) -> None:
        service = BlogPostService()
        first = service.create({'title': 'First'})
        second = service.create({'title': 'Second'})
        assert [p.id for p in service.list()][:2] == [second.id, first.id]


class TestSlugProperties:
    """Observable slug guarantees across services."""

    def test_two_posts_with_same_title(self, app) -> None:
        service = BlogPostService()
        first = service.create({'title': 'Hello World'})
        second = service.create({'title': 'Hello World'})
        assert (first.slug, second.slug) == ('hello-world', 'hello-world-1')

    @pytest.mark.parametrize('name', ['  Ünïcode -- Title!! ', '__init__', 'A/B Testing 101'])
    def test_resolved_slug_shape(self, app, name) -> None:
        slug = CategoryService().create({'name': name}).slug
        assert slug
        assert set(slug) <= set('abcdefghijklmnopqrstuvwxyz0123456789-')
        assert not slug.startswith('-') and not slug.endswith('-')

    def test_cleared_gallery_stays_cleared(self, app, post) -> None:
        service = BlogPostService()
        service.update(post.id, {'gallery_images': [{'url': 'a.jpg'}]})
        service.update(post.id, {'gallery_images': []})
        updated = service.update(post.id, {'description': 'Edited'})
        assert updated.gallery_images == []
