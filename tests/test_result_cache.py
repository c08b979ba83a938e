from wordassist.result_cache import CacheSet, Category, SimpleWordCache


def test_missing_word_is_empty():
    cache = SimpleWordCache()
    assert cache.get(["absent"]) == []


def test_set_then_get_keeps_order():
    cache = SimpleWordCache()
    cache.set(["happy"], ["glad", "cheerful", "content"])
    assert cache.get(["happy"]) == ["glad", "cheerful", "content"]

    cache.set(["happy"], ["joyful"])
    assert cache.get(["happy"]) == ["joyful"]


def test_only_first_key_element_is_used():
    cache = SimpleWordCache()
    cache.set(["ice", "cream"], ["sorbet"])
    assert cache.get(["ice"]) == ["sorbet"]
    assert cache.get(["ice", "age"]) == ["sorbet"]
    assert cache.get(["cream"]) == []


def test_categories_are_independent():
    caches = CacheSet()
    caches[Category.SYNONYM].set(["happy"], ["glad"])
    assert caches[Category.ANTONYM].get(["happy"]) == []
    assert caches["synonym"].get(["happy"]) == ["glad"]


def test_clear_resets_every_category():
    caches = CacheSet()
    for category in Category:
        caches[category].set(["word"], ["x"])
    old = caches[Category.RHYME]

    caches.clear()

    for category in Category:
        assert caches[category].get(["word"]) == []
    # previously handed-out caches are detached, not emptied
    assert old.get(["word"]) == ["x"]
    assert caches[Category.RHYME] is not old


def test_mutating_a_hit_does_not_change_the_cache():
    cache = SimpleWordCache()
    cache.set(["happy"], ["glad"])
    hit = cache.get(["happy"])
    hit.append("merry")
    hit.clear()
    assert cache.get(["happy"]) == ["glad"]
