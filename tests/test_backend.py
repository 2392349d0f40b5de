"""
Backend Service Tests

Accounts and the session pointer, boards, uploads, interactions, and the
ranking operations wired through the storage-backed stores.

Run:
----
    pytest tests/test_backend.py -v
"""

import random
import threading

import pytest

from pinmeta.storage import KEY_SESSION, KEY_TRENDING
from pinmeta_server.constants import TAGS_POOL
from pinmeta_server.errors import ConflictError, NotFoundError, ValidationError
from pinmeta_server.services.backend import PinMetaBackend

from conftest import StepClock, upload


class TestSeed:

    def test_seeds_admin_on_empty_store(self, backend):
        admin = backend.users.get_by_id("admin_01")
        assert admin is not None
        assert admin.preferences == ["minimal", "futuristic"]
        assert backend.get_images() == []

    def test_does_not_reseed_existing_store(self, storage, backend):
        backend.signup("ann", "ann@example.com", "pw")
        again = PinMetaBackend(storage)
        assert again.users.get_by_email("ann@example.com") is not None

    def test_seed_data_resets_trending(self, backend):
        upload(backend)
        backend.refresh_trending()
        assert backend.aggregator.cache.image_ids
        backend.seed_data()
        assert backend.aggregator.cache.image_ids == ()
        assert backend.get_trending() == []


class TestAccounts:

    def test_signup_logs_in_with_random_preference(self, backend):
        user = backend.signup("ann", "ann@example.com", "pw")
        assert user.user_id.startswith("user_")
        assert len(user.preferences) == 1
        assert user.preferences[0] in TAGS_POOL
        assert backend.get_current_user() == user

    def test_signup_duplicate_email(self, backend):
        backend.signup("ann", "ann@example.com", "pw")
        with pytest.raises(ConflictError):
            backend.signup("ann2", "ANN@example.com", "pw2")

    def test_signup_requires_username_and_email(self, backend):
        with pytest.raises(ValidationError):
            backend.signup("  ", "x@example.com", "pw")

    def test_login_plaintext(self, backend):
        assert backend.login("admin@pinmeta.com", "wrong") is None
        assert backend.get_current_user() is None
        user = backend.login("admin@pinmeta.com", "password")
        assert user.user_id == "admin_01"
        assert backend.get_current_user().user_id == "admin_01"

    def test_logout_clears_session(self, storage, backend):
        backend.login("admin@pinmeta.com", "password")
        assert storage.get(KEY_SESSION) == {"user_id": "admin_01"}
        backend.logout()
        assert backend.get_current_user() is None
        assert storage.get(KEY_SESSION) is None

    def test_session_survives_new_backend(self, storage, backend):
        backend.login("admin@pinmeta.com", "password")
        assert PinMetaBackend(storage).get_current_user().user_id == "admin_01"


class TestUploadsAndInteractions:

    def test_upload_assigns_server_fields_and_prepends(self, backend, clock):
        first = upload(backend, tags=["a"])
        second = upload(backend, tags=["b"], interaction_count=99, user_id="spoof")
        assert first.image_id.startswith("img_")
        assert first.image_id != second.image_id
        assert second.user_id == "guest"
        assert second.interaction_count == 0
        assert second.upload_timestamp > first.upload_timestamp
        assert [img.image_id for img in backend.get_images()] == [second.image_id, first.image_id]

    def test_upload_owner_is_current_user(self, backend):
        backend.login("admin@pinmeta.com", "password")
        assert upload(backend).user_id == "admin_01"

    def test_upload_rejects_unknown_category(self, backend):
        with pytest.raises(ValidationError):
            upload(backend, category="Spaceships")

    def test_anonymous_interaction_is_ignored(self, backend):
        img = upload(backend)
        assert backend.interact(img.image_id, "like") is None
        assert backend.get_image(img.image_id).interaction_count == 0
        assert backend.interactions.count() == 0

    def test_interaction_increments_counter(self, backend):
        img = upload(backend)
        backend.login("admin@pinmeta.com", "password")
        interaction = backend.interact(img.image_id, "save")
        backend.interact(img.image_id, "comment")
        assert interaction.user_id == "admin_01"
        assert interaction.type == "save"
        assert backend.get_image(img.image_id).interaction_count == 2
        assert backend.interactions.count() == 2

    def test_concurrent_interactions_are_all_recorded(self, storage):
        backend = PinMetaBackend(storage, rng=random.Random(3))
        img = upload(backend)
        backend.login("admin@pinmeta.com", "password")

        def like_many():
            for _ in range(50):
                backend.interact(img.image_id, "like")

        threads = [threading.Thread(target=like_many) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert backend.interactions.count() == 400
        assert backend.get_image(img.image_id).interaction_count == 400

    def test_unknown_interaction_type(self, backend):
        img = upload(backend)
        backend.login("admin@pinmeta.com", "password")
        with pytest.raises(ValidationError):
            backend.interact(img.image_id, "share")


class TestBoards:

    def test_create_and_list_per_user(self, backend):
        guest_board = backend.create_board("Guest stuff")
        backend.login("admin@pinmeta.com", "password")
        admin_board = backend.create_board("  Ideas ")
        assert admin_board.name == "Ideas"
        assert admin_board.user_id == "admin_01"
        assert [b.board_id for b in backend.get_boards()] == [admin_board.board_id]
        backend.logout()
        assert [b.board_id for b in backend.get_boards()] == [guest_board.board_id]

    def test_save_to_board_ignores_duplicates(self, backend):
        board = backend.create_board("Ideas")
        backend.save_to_board(board.board_id, "img_1")
        updated = backend.save_to_board(board.board_id, "img_1")
        assert updated.image_ids == ["img_1"]

    def test_save_to_unknown_board(self, backend):
        with pytest.raises(NotFoundError):
            backend.save_to_board("board_missing", "img_1")

    def test_empty_board_name(self, backend):
        with pytest.raises(ValidationError):
            backend.create_board("   ")


class TestRankingOperations:

    def test_anonymous_feed_is_newest_first(self, backend):
        a = upload(backend)
        b = upload(backend)
        assert [img.image_id for img in backend.get_feed()] == [b.image_id, a.image_id]

    def test_feed_prefers_user_tags(self, backend):
        minimal = upload(backend, tags=["minimal"])
        newer = upload(backend, tags=["vintage"])
        backend.login("admin@pinmeta.com", "password")
        assert [img.image_id for img in backend.get_feed()] == [minimal.image_id, newer.image_id]

    def test_feed_pagination(self, backend):
        for _ in range(5):
            upload(backend)
        assert len(backend.get_feed(page=0, limit=2)) == 2
        assert len(backend.get_feed(page=2, limit=2)) == 1

    def test_search_ranks_by_relevance(self, backend):
        tagged = upload(backend, tags=["forest"], description="just a long description")
        described = upload(backend, description="a walk through the forest")
        upload(backend, tags=["city"], description="nothing relevant here")
        results = backend.search("forest")
        assert [img.image_id for img in results] == [tagged.image_id, described.image_id]

    @pytest.mark.parametrize("query", ["", "   ", "a"])
    def test_search_without_tokens_returns_feed(self, backend, query):
        a = upload(backend)
        b = upload(backend)
        assert [img.image_id for img in backend.search(query)] == [b.image_id, a.image_id]

    def test_find_similar(self, backend):
        target = upload(backend, category="Animals", tags=["cats", "cute"])
        twin = upload(backend, category="Animals", tags=["cats", "cute"])
        upload(backend, category="Food", tags=["pizza"], dominant_color="#ffffff")
        assert [img.image_id for img in backend.find_similar(target.image_id)] == [twin.image_id]

    def test_find_similar_unknown_image(self, backend):
        with pytest.raises(NotFoundError):
            backend.find_similar("img_missing")

    def test_trending_refresh_and_persistence(self, storage, backend):
        quiet = upload(backend)
        busy = upload(backend)
        backend.login("admin@pinmeta.com", "password")
        for _ in range(3):
            backend.interact(busy.image_id, "like")
        backend.interact(quiet.image_id, "like")

        assert backend.get_trending() == []
        assert backend.refresh_trending() is True
        assert [img.image_id for img in backend.get_trending()] == [busy.image_id, quiet.image_id]
        assert storage.get(KEY_TRENDING)["image_ids"] == [busy.image_id, quiet.image_id]

        reloaded = PinMetaBackend(storage)
        assert reloaded.aggregator.cache.image_ids == (busy.image_id, quiet.image_id)

    def test_old_interactions_only_count_through_lifetime(self, storage):
        clock = StepClock()
        backend = PinMetaBackend(storage, clock=clock, rng=random.Random(1))
        old = upload(backend)
        backend.login("admin@pinmeta.com", "password")
        for _ in range(5):
            backend.interact(old.image_id, "like")
        fresh = upload(backend)
        backend.interact(fresh.image_id, "like")

        clock.now += 25 * 3600 * 1000
        backend.interact(fresh.image_id, "like")
        backend.refresh_trending()
        # old: 0 recent + 5 * 0.1 = 0.5; fresh: 1 recent + 2 * 0.1 = 1.2
        assert [img.image_id for img in backend.get_trending()] == [fresh.image_id, old.image_id]

    def test_exposed_scoring(self, backend):
        a = upload(backend, category="Animals", tags=["cats", "cute"], dominant_color="#111111")
        b = upload(backend, category="Animals", tags=["cats", "cute"], dominant_color="#222222")
        assert backend.score_similarity(a, b) == pytest.approx(0.85)
        assert backend.score_relevance(a, "") == 0

    def test_stats(self, backend):
        upload(backend)
        stats = backend.stats()
        assert stats["images"] == 1
        assert stats["users"] == 1
        assert stats["trending"]["size"] == 0
