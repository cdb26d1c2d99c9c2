import pytest
from pytest_bdd import given, parsers, then, when

from e2e_suite import steps
from e2e_suite.types import Language
from e2e_suite.world import JapaneseScenarioWorld, ScenarioWorld


@pytest.fixture
def language() -> Language:
    return Language.JAPANESE


# ナビゲーション


@given(parsers.parse('"{url}" に移動する'))
@when(parsers.parse('"{url}" に移動する'))
def navigate_to(world: ScenarioWorld, url: str) -> None:
    steps.navigate_to(world, url)


@given(parsers.parse('"{page_name}" ページにいる'))
def on_named_page(world: ScenarioWorld, page_name: str) -> None:
    steps.open_named_page(world, page_name)


@when(parsers.parse('"{text}" をクリックする'))
def click_text(world: ScenarioWorld, text: str) -> None:
    steps.click_text(world, text)


@when(parsers.parse('セレクター "{selector}" の要素をクリックする'))
def click_selector(world: ScenarioWorld, selector: str) -> None:
    steps.click_selector(world, selector)


# 入力


@when(parsers.parse('"{label}" フィールドに "{text}" を入力する'))
def type_into_field(world: ScenarioWorld, label: str, text: str) -> None:
    steps.type_into_field(world, label, text)


@when(parsers.parse('セレクター "{selector}" のフィールドに "{text}" を入力する'))
def type_into_selector(world: ScenarioWorld, selector: str, text: str) -> None:
    steps.type_into_selector(world, selector, text)


@when(parsers.parse('セレクター "{selector}" に日本語 "{text}" を入力する'))
def type_japanese_into_selector(world: ScenarioWorld, selector: str, text: str) -> None:
    assert isinstance(world, JapaneseScenarioWorld)
    world.set_japanese_input(selector, text)


@when(parsers.parse('"{label}" フィールドをクリアする'))
def clear_field(world: ScenarioWorld, label: str) -> None:
    steps.clear_field(world, label)


@when(parsers.parse('"{key}" キーを押す'))
def press_key(world: ScenarioWorld, key: str) -> None:
    steps.press_key(world, key)


# 待機


@when(parsers.parse("{seconds:d}秒待機する"))
@when(parsers.parse("{seconds:d}秒待つ"))
def wait_seconds(world: ScenarioWorld, seconds: int) -> None:
    steps.wait_seconds(world, seconds)


@when(parsers.parse('要素 "{selector}" が表示されるまで待つ'))
def wait_for_visible(world: ScenarioWorld, selector: str) -> None:
    steps.wait_for_visible(world, selector)


@when(parsers.parse('要素 "{selector}" が非表示になるまで待つ'))
def wait_for_hidden(world: ScenarioWorld, selector: str) -> None:
    steps.wait_for_hidden(world, selector)


@when(parsers.parse('テキスト "{text}" が表示されるまで待つ'))
def wait_for_text(world: ScenarioWorld, text: str) -> None:
    steps.wait_for_text(world, text)


# 検証


@then(parsers.parse('テキスト "{text}" が表示されている'))
@then(parsers.parse('"{text}" のテキストが表示されている'))
def text_visible(world: ScenarioWorld, text: str) -> None:
    steps.assert_text_visible(world, text)


@then(parsers.parse('テキスト "{text}" が表示されていない'))
def text_not_visible(world: ScenarioWorld, text: str) -> None:
    steps.assert_text_not_visible(world, text)


@then(parsers.parse('要素 "{selector}" が表示されている'))
def element_visible(world: ScenarioWorld, selector: str) -> None:
    steps.assert_element_visible(world, selector)


@then(parsers.parse('要素 "{selector}" が表示されていない'))
def element_not_visible(world: ScenarioWorld, selector: str) -> None:
    steps.assert_element_not_visible(world, selector)


@then(parsers.parse('要素 "{selector}" にテキスト "{text}" が含まれている'))
def element_contains_text(world: ScenarioWorld, selector: str, text: str) -> None:
    steps.assert_element_contains_text(world, selector, text)


@then(parsers.parse('ページURLに "{fragment}" が含まれている'))
def url_contains(world: ScenarioWorld, fragment: str) -> None:
    steps.assert_url_contains(world, fragment)


@then(parsers.parse('ページURLが "{url}" である'))
def url_is(world: ScenarioWorld, url: str) -> None:
    steps.assert_url_is(world, url)


@then(parsers.parse('ページタイトルが "{title}" である'))
def title_is(world: ScenarioWorld, title: str) -> None:
    steps.assert_title_is(world, title)


@then(parsers.parse('ページタイトルに "{fragment}" が含まれている'))
def title_contains(world: ScenarioWorld, fragment: str) -> None:
    steps.assert_title_contains(world, fragment)


# ユーティリティ


@when("スクリーンショットを撮る")
def take_screenshot(world: ScenarioWorld) -> None:
    steps.take_screenshot(world)


@when(parsers.parse('"{name}" という名前でスクリーンショットを撮る'))
def take_named_screenshot(world: ScenarioWorld, name: str) -> None:
    steps.take_screenshot(world, name)


@when("ページを更新する")
def refresh(world: ScenarioWorld) -> None:
    steps.refresh(world)


@when("前のページに戻る")
def go_back(world: ScenarioWorld) -> None:
    steps.go_back(world)


@when(parsers.parse('要素 "{selector}" までスクロールする'))
def scroll_to(world: ScenarioWorld, selector: str) -> None:
    steps.scroll_to(world, selector)


@when(parsers.parse('要素 "{selector}" にホバーする'))
def hover(world: ScenarioWorld, selector: str) -> None:
    steps.hover(world, selector)


@when("デバッグで一時停止する")
def pause(world: ScenarioWorld) -> None:
    steps.pause(world)


@when("ページタイトルを表示する")
def log_page_title(world: ScenarioWorld) -> None:
    steps.log_page_title(world)


@when("現在のURLを表示する")
def log_current_url(world: ScenarioWorld) -> None:
    steps.log_current_url(world)


@then(parsers.parse('メッセージ "{message}" をログに出力する'))
def log_message(world: ScenarioWorld, message: str) -> None:
    steps.log_message(world, message)


@when("メインナビゲーションメニューを確認する")
def navigation_visible(world: ScenarioWorld) -> None:
    steps.assert_navigation_visible(world)


@when("ブラウザを最大化する")
def maximize(world: ScenarioWorld) -> None:
    steps.maximize(world)


@then("ページが正常に読み込まれている")
def page_loaded(world: ScenarioWorld) -> None:
    steps.assert_page_loaded(world)


@when(parsers.parse('フォーカスを "{selector}" に移動する'))
def focus(world: ScenarioWorld, selector: str) -> None:
    steps.focus(world, selector)


@then(parsers.parse('フィールド "{selector}" にフォーカスが当たっている'))
def focused(world: ScenarioWorld, selector: str) -> None:
    steps.assert_focused(world, selector)


@then("エラーが発生していない")
def no_page_errors(world: ScenarioWorld) -> None:
    steps.assert_no_page_errors(world)


@when("コンソールエラーをチェックする")
def watch_console_errors(world: ScenarioWorld) -> None:
    steps.watch_console_errors(world)


# お問い合わせ


@given("Automation Exercise のホームページにいる")
def on_homepage(world: ScenarioWorld) -> None:
    steps.open_homepage(world)


@given("一意のテストデータを生成している")
def generated_test_data(world: ScenarioWorld) -> None:
    steps.generate_test_data(world)


@when("お問い合わせページに移動する")
def open_contact_page(world: ScenarioWorld) -> None:
    steps.open_contact_page(world)


@when("空白のメールでお問い合わせフォームを入力する:")
@when("有効なデータでお問い合わせフォームを入力する:")
@when("無効なデータでお問い合わせフォームを入力する:")
@when("以下のデータでお問い合わせフォームを入力する:")
def fill_contact_form(world: ScenarioWorld, datatable: list[list[str]]) -> None:
    steps.fill_contact_form(world, datatable)


@when(parsers.parse('テストファイル "{file_path}" をアップロードする'))
def upload_file(world: ScenarioWorld, file_path: str) -> None:
    steps.upload_file(world, file_path)


@when("送信ボタンをクリックする")
def submit_contact_form(world: ScenarioWorld) -> None:
    steps.submit_contact_form(world)


@when("確認ダイアログを処理する")
def accept_confirmation_dialog(world: ScenarioWorld) -> None:
    steps.accept_confirmation_dialog(world)


@then("お問い合わせページのタイトルが表示されている")
def contact_title(world: ScenarioWorld) -> None:
    steps.assert_contact_title(world)


@then("お問い合わせフォームが表示されている")
def contact_form_visible(world: ScenarioWorld) -> None:
    steps.assert_contact_form_visible(world)


@then(parsers.parse('メールバリデーションメッセージ "{expected_message}" が表示される'))
def email_validation_message(world: ScenarioWorld, expected_message: str) -> None:
    steps.assert_email_validation_message(world, expected_message)


@then(parsers.parse('成功メッセージ "{expected_message}" が表示される'))
def success_message(world: ScenarioWorld, expected_message: str) -> None:
    steps.assert_success_message(world, expected_message)


@then(parsers.parse('"{field}" フィールドのバリデーションエラーが表示される'))
def field_validation_error(world: ScenarioWorld, field: str) -> None:
    steps.assert_field_has_validation_error(world, field)


@when("フォームをクリアする")
def clear_contact_form(world: ScenarioWorld) -> None:
    steps.clear_contact_form(world)


@then("フォームが空であることを確認する")
def contact_form_empty(world: ScenarioWorld) -> None:
    steps.assert_contact_form_empty(world)


@then("エラーメッセージが表示されない")
def no_error_messages(world: ScenarioWorld) -> None:
    steps.assert_no_error_messages(world)
