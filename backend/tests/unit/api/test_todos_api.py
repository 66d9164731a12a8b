"""
Unit Tests for Todo API Endpoints
Todos are private to their owner.
"""
from httpx import AsyncClient
from faker import Faker

from conftest import API

fake = Faker()


async def create_todo(client: AsyncClient, **overrides) -> dict:
    payload = {'title': fake.sentence()}
    payload.update(overrides)
    response = await client.post(f'{API}/todos', json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestTodoAccess:

    async def test_requires_session(self, client: AsyncClient):
        assert (await client.get(f'{API}/todos')).status_code == 401
        assert (await client.post(f'{API}/todos', json={'title': 'x'})).status_code == 401

    async def test_list_only_own_todos(self, user_client: AsyncClient, other_client: AsyncClient):
        mine = await create_todo(user_client)
        await create_todo(other_client)

        response = await user_client.get(f'{API}/todos')

        assert response.status_code == 200
        assert [t['id'] for t in response.json()] == [mine['id']]

    async def test_other_users_todo_is_not_found(self, user_client: AsyncClient, other_client: AsyncClient):
        todo = await create_todo(other_client)

        update = await user_client.put(f'{API}/todos/{todo["id"]}', json={'completed': True})
        delete = await user_client.delete(f'{API}/todos/{todo["id"]}')

        assert update.status_code == 404
        assert update.json()['code'] == 'TODO_NOT_FOUND'
        assert delete.status_code == 404


class TestTodoCrud:

    async def test_create_defaults(self, user_client: AsyncClient, test_user):
        todo = await create_todo(user_client, title='장보기')

        assert todo['title'] == '장보기'
        assert todo['completed'] is False
        assert todo['priority'] == 'medium'
        assert todo['userId'] == test_user.id
        assert todo['dueDate'] is None

    async def test_create_with_priority_and_due_date(self, user_client: AsyncClient):
        todo = await create_todo(user_client, priority='high', dueDate='2026-12-31T09:00:00')

        assert todo['priority'] == 'high'
        assert todo['dueDate'].startswith('2026-12-31T09:00:00')

    async def test_invalid_priority(self, user_client: AsyncClient):
        response = await user_client.post(f'{API}/todos', json={'title': 'x', 'priority': 'urgent'})

        assert response.status_code == 400

    async def test_partial_update(self, user_client: AsyncClient):
        todo = await create_todo(user_client, title='원래 제목', description='메모')

        response = await user_client.put(f'{API}/todos/{todo["id"]}', json={'completed': True})

        assert response.status_code == 200
        data = response.json()
        assert data['completed'] is True
        assert data['title'] == '원래 제목'
        assert data['description'] == '메모'

    async def test_clear_description(self, user_client: AsyncClient):
        todo = await create_todo(user_client, description='메모')

        response = await user_client.put(f'{API}/todos/{todo["id"]}', json={'description': None})

        assert response.json()['description'] is None

    async def test_null_title_is_ignored(self, user_client: AsyncClient):
        todo = await create_todo(user_client, title='유지')

        response = await user_client.put(f'{API}/todos/{todo["id"]}', json={'title': None})

        assert response.json()['title'] == '유지'

    async def test_delete(self, user_client: AsyncClient):
        todo = await create_todo(user_client)

        response = await user_client.delete(f'{API}/todos/{todo["id"]}')

        assert response.status_code == 200
        assert response.json() == {'message': 'Todo가 삭제되었습니다.'}
        assert (await user_client.get(f'{API}/todos')).json() == []

    async def test_invalid_id(self, user_client: AsyncClient):
        response = await user_client.delete(f'{API}/todos/abc')

        assert response.status_code == 400
