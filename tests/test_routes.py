"""
Route testing module for the content API.

This module exercises the HTTP surface end to end: access control, request
validation, status codes, the camelCase wire format and the JSON error
envelope produced by api.errors.
"""

from models.lead import Lead


class TestAccessControl:
    """Session-based authentication and the admin role."""

    def test_anonymous_rejected(self, client) -> None:
        response = client.get('/api/admin/categories')
        assert response.status_code == 401
        assert response.get_json()['error_code'] == 'authentication_error'

    def test_non_admin_rejected(self, editor_client) -> None:
        response = editor_client.post('/api/admin/categories', json={'name': 'Design'})
        assert response.status_code == 403
        assert response.get_json()['details'] == {'required_role': 'ADMIN'}

    def test_non_admin_may_list_leads_and_tags(self, editor_client) -> None:
        assert editor_client.get('/api/admin/leads').status_code == 200
        assert editor_client.get('/api/admin/tags').status_code == 200

    def test_security_headers(self, admin_client) -> None:
        response = admin_client.get('/api/admin/categories')
        assert response.headers['X-Content-Type-Options'] == 'nosniff'
        assert 'no-store' in response.headers['Cache-Control']


class TestContentRoutes:
    """CRUD endpoints of slugged content."""

    def test_create_and_fetch_category(self, admin_client) -> None:
        response = admin_client.post('/api/admin/categories',
                                     json={'name': ' Tech News ', 'description': 'Latest'})
        assert response.status_code == 201
        created = response.get_json()
        assert created['slug'] == 'tech-news'
        assert created['name'] == 'Tech News'
        assert 'createdAt' in created

        response = admin_client.get(f"/api/admin/categories/{created['id']}")
        assert response.status_code == 200
        assert response.get_json()['description'] == 'Latest'

    def test_duplicate_name_gets_suffix(self, admin_client) -> None:
        admin_client.post('/api/admin/industries', json={'name': 'Retail'})
        response = admin_client.post('/api/admin/industries', json={'name': 'Retail'})
        assert response.get_json()['slug'] == 'retail-1'

    def test_missing_name(self, admin_client) -> None:
        response = admin_client.post('/api/admin/authors', json={'bio': 'No name'})
        body = response.get_json()
        assert response.status_code == 400
        assert body['error_code'] == 'validation_error'
        assert 'name' in body['details']

    def test_body_must_be_json_object(self, admin_client) -> None:
        response = admin_client.post('/api/admin/categories', data='name=Design',
                                     content_type='application/x-www-form-urlencoded')
        assert response.status_code == 400

        response = admin_client.post('/api/admin/categories', json=['Design'])
        assert response.status_code == 400

    def test_update_with_conflicting_slug(self, admin_client) -> None:
        admin_client.post('/api/admin/categories', json={'name': 'Design'})
        other = admin_client.post('/api/admin/categories', json={'name': 'Marketing'}).get_json()

        response = admin_client.put(f"/api/admin/categories/{other['id']}", json={'slug': 'design'})
        body = response.get_json()
        assert response.status_code == 409
        assert body['error_code'] == 'slug_conflict'
        assert body['message'] == 'Requested slug is already in use'

    def test_partial_update(self, admin_client) -> None:
        created = admin_client.post('/api/admin/services',
                                    json={'title': 'Consulting', 'description': 'Advice'}).get_json()

        response = admin_client.put(f"/api/admin/services/{created['id']}",
                                    json={'description': 'Expert advice'})
        body = response.get_json()
        assert response.status_code == 200
        assert body['title'] == 'Consulting'
        assert body['slug'] == 'consulting'
        assert body['description'] == 'Expert advice'

    def test_unknown_record(self, admin_client) -> None:
        response = admin_client.get('/api/admin/blog/4040')
        body = response.get_json()
        assert response.status_code == 404
        assert body['error_code'] == 'resource_not_found'

    def test_delete_status_codes(self, admin_client) -> None:
        category = admin_client.post('/api/admin/categories', json={'name': 'Gone'}).get_json()
        response = admin_client.delete(f"/api/admin/categories/{category['id']}")
        assert response.status_code == 204
        assert response.data == b''

        study = admin_client.post('/api/admin/case-studies', json={'title': 'Gone'}).get_json()
        response = admin_client.delete(f"/api/admin/case-studies/{study['id']}")
        assert response.status_code == 200
        assert response.get_json()['message'] == 'Case study deleted successfully'

    def test_case_study_with_unknown_industry(self, admin_client) -> None:
        response = admin_client.post('/api/admin/case-studies',
                                     json={'title': 'Rollout', 'industryId': 12})
        assert response.status_code == 404


class TestBlogRoutes:
    """Blog posts with their associations."""

    def test_create_with_associations(self, admin_client, author, categories) -> None:
        response = admin_client.post('/api/admin/blog', json={
            'title': 'Shipping Flask Apps',
            'content': 'Body',
            'published': True,
            'authorId': author.id,
            'categoryIds': [categories[0].id, categories[1].id],
            'tagNames': ['Flask', 'flask', 'Deployment'],
            'galleryImages': [
                {'url': 'cover.jpg', 'altText': 'Cover'},
                {'url': 'detail.jpg'},
            ],
        })
        body = response.get_json()

        assert response.status_code == 201
        assert body['slug'] == 'shipping-flask-apps'
        assert body['published'] is True
        assert body['publishedAt'] is not None
        assert body['author']['name'] == 'Grace Hopper'
        assert [c['slug'] for c in body['categories']] == ['design', 'engineering']
        assert [t['slug'] for t in body['tags']] == ['deployment', 'flask']
        assert [(i['url'], i['displayOrder']) for i in body['galleryImages']] == [
            ('cover.jpg', 0), ('detail.jpg', 1)
        ]
        assert body['galleryImages'][0]['altText'] == 'Cover'

    def test_update_replaces_associations(self, admin_client, post, categories) -> None:
        admin_client.put(f'/api/admin/blog/{post.id}', json={
            'categoryIds': [categories[0].id],
            'tagNames': ['Old'],
        })
        response = admin_client.put(f'/api/admin/blog/{post.id}', json={
            'categoryIds': [],
            'tagNames': ['New'],
        })
        body = response.get_json()

        assert response.status_code == 200
        assert body['categories'] == []
        assert [t['name'] for t in body['tags']] == ['New']

    def test_missing_category_leaves_post_unchanged(self, admin_client, post) -> None:
        response = admin_client.put(f'/api/admin/blog/{post.id}', json={
            'title': 'Renamed',
            'categoryIds': [999],
        })
        assert response.status_code == 404

        body = admin_client.get(f'/api/admin/blog/{post.id}').get_json()
        assert body['title'] == 'Hello World'

    def test_gallery_entry_needs_url(self, admin_client, post) -> None:
        response = admin_client.put(f'/api/admin/blog/{post.id}',
                                    json={'galleryImages': [{'altText': 'No url'}]})
        assert response.status_code == 400

    def test_overlong_tag_name(self, admin_client, post) -> None:
        response = admin_client.put(f'/api/admin/blog/{post.id}',
                                    json={'tagNames': ['x' * 51]})
        assert response.status_code == 400
        assert 'tagNames' in response.get_json()['details']

    def test_tags_listing(self, admin_client, post) -> None:
        admin_client.put(f'/api/admin/blog/{post.id}', json={'tagNames': ['Zope', 'Asyncio']})

        response = admin_client.get('/api/admin/tags')
        tags = response.get_json()
        assert response.status_code == 200
        assert [(t['name'], t['slug']) for t in tags] == [('Asyncio', 'asyncio'), ('Zope', 'zope')]
        assert set(tags[0]) == {'id', 'name', 'slug'}


class TestSettingsRoutes:
    """Settings endpoints."""

    def test_save_and_read(self, admin_client) -> None:
        response = admin_client.post('/api/admin/settings', json={
            'category': 'unsplash',
            'unsplash_access_key': 'access-123',
            'unsplash_app_name': 'acme',
            'ignored_number': 5,
        })
        assert response.status_code == 200
        assert sorted(response.get_json()['saved']) == ['unsplash_access_key', 'unsplash_app_name']

        response = admin_client.get('/api/admin/settings?category=unsplash')
        assert response.get_json() == {
            'unsplash_access_key': 'access-123',
            'unsplash_app_name': 'acme',
        }

    def test_category_required(self, admin_client) -> None:
        response = admin_client.post('/api/admin/settings', json={'site_name': 'Acme'})
        assert response.status_code == 400

    def test_missing_key_is_configuration_error(self, app, admin_client, monkeypatch) -> None:
        monkeypatch.delenv('SETTINGS_ENCRYPTION_KEY', raising=False)
        app.config['SETTINGS_ENCRYPTION_KEY'] = None

        response = admin_client.post('/api/admin/settings', json={
            'category': 'unsplash',
            'unsplash_secret_key': 'secret',
        })
        body = response.get_json()
        assert response.status_code == 500
        assert body['error_code'] == 'configuration_error'
        assert 'trace_id' in body


class TestLeadRoutes:
    """Public lead capture and the admin leads listing."""

    def test_submit_lead(self, client, store) -> None:
        response = client.post('/api/leads', json={
            'fullName': 'Ada Lovelace',
            'email': 'ADA@example.com',
            'sourceFormName': 'contact',
        }, headers={'X-Forwarded-For': '203.0.113.9, 10.0.0.1'})
        body = response.get_json()

        assert response.status_code == 201
        assert body['lead']['email'] == 'ada@example.com'
        assert body['lead']['status'] == Lead.STATUS_NEW

        assert store.get(Lead, body['lead']['id']).ip_address == '203.0.113.9'

    def test_submit_invalid_lead(self, client) -> None:
        response = client.post('/api/leads', json={'fullName': 'Ada'})
        body = response.get_json()
        assert response.status_code == 400
        assert 'email' in body['details']

    def test_list_leads(self, client, admin_client) -> None:
        for name in ('Charlie', 'alice', 'Bob'):
            client.post('/api/leads', json={
                'fullName': name,
                'email': f'{name.lower()}@example.com',
                'sourceFormName': 'contact',
            })

        response = admin_client.get('/api/admin/leads?sortBy=fullName&sortOrder=asc&limit=2')
        body = response.get_json()
        assert response.status_code == 200
        assert body['totalCount'] == 3
        assert body['totalPages'] == 2
        assert body['currentPage'] == 1
        assert len(body['leads']) == 2

    def test_list_leads_invalid_sort(self, admin_client) -> None:
        response = admin_client.get('/api/admin/leads?sortBy=ipAddress')
        assert response.status_code == 400

    def test_list_leads_date_filter(self, client, admin_client) -> None:
        client.post('/api/leads', json={
            'fullName': 'Ada', 'email': 'ada@example.com', 'sourceFormName': 'contact',
        })
        response = admin_client.get('/api/admin/leads?filterEndDate=2000-01-01&searchQuery=')
        assert response.get_json()['totalCount'] == 0

    def test_update_status(self, client, admin_client) -> None:
        lead = client.post('/api/leads', json={
            'fullName': 'Ada', 'email': 'ada@example.com', 'sourceFormName': 'contact',
        }).get_json()['lead']

        response = admin_client.put(f"/api/admin/leads/{lead['id']}", json={'status': 'Qualified'})
        assert response.status_code == 200
        assert response.get_json()['status'] == 'Qualified'

        response = admin_client.put(f"/api/admin/leads/{lead['id']}", json={'status': 'Archived'})
        assert response.status_code == 400
