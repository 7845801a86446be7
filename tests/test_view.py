"""Tests for the server-side Jinja view"""

import time

from contact_manager.view import JinjaView


CONTACTS = [
    {
        "id": 1,
        "full_name": "Kermit the Frog",
        "phone_number": "12345",
        "email": "green@kermitthefrog.com",
        "tags": ["frog", "icon"],
    }
]


class TestRendering:
    def test_render_contacts(self):
        view = JinjaView()
        view.click_add_contact()
        view.render_contacts(CONTACTS)
        assert "Kermit the Frog" in view.contacts_html
        assert "<li>icon</li>" in view.contacts_html
        assert "/hx/contacts/1/delete" in view.contacts_html
        assert view.form_hidden and not view.contacts_hidden

    def test_render_no_contacts(self):
        view = JinjaView()
        view.render_contacts([])
        assert "There are no contacts." in view.contacts_html

    def test_contacts_are_escaped(self):
        view = JinjaView()
        view.render_contacts([{**CONTACTS[0], "full_name": "<script>x</script>"}])
        assert "<script>x" not in view.contacts_html
        assert "&lt;script&gt;" in view.contacts_html

    def test_render_tags(self):
        view = JinjaView()
        view.render_tags(["dog", "frog"])
        assert 'data-tagname="dog"' in view.tags_html
        assert "activeFilter" not in view.tags_html

    def test_render_error_is_shown_once(self):
        view = JinjaView()
        view.render_error("400: Bad Request")
        assert "400: Bad Request" in view.render_main()
        assert "400: Bad Request" not in view.render_main()

    def test_render_page(self):
        view = JinjaView()
        view.render_tags(["dog"])
        view.render_contacts(CONTACTS)
        html = view.render_page(csrf_token="token-123")
        assert 'id="addContactForm" class="hidden"' in html
        assert "X-CSRFToken" in html and "token-123" in html
        assert "Kermit the Frog" in html


class TestEvents:
    def test_tag_click_highlights_only_clicked_tag(self):
        view = JinjaView()
        clicked = []
        view.bind_tag_click(clicked.append)
        view.render_tags(["dog", "frog"])

        view.click_tag("dog")
        assert view.active_filter == "dog"
        assert 'class="tag activeFilter" data-tagname="dog"' in view.tags_html

        view.click_tag("frog")
        assert 'class="tag activeFilter" data-tagname="frog"' in view.tags_html
        assert 'class="tag activeFilter" data-tagname="dog"' not in view.tags_html

        view.click_tag("frog")
        assert view.active_filter is None
        assert "activeFilter" not in view.tags_html
        assert clicked == ["dog", "frog", "frog"]

    def test_add_contact_button_shows_tag_checkboxes(self):
        view = JinjaView()
        view.render_tags(["dog", "frog"])
        view.click_add_contact()
        assert view.contacts_hidden and not view.form_hidden
        assert 'name="dog"' in view.add_contact_tags_html
        assert 'type="checkbox"' in view.add_contact_tags_html

    def test_cancel_restores_contacts_and_clears_form(self):
        view = JinjaView()
        view.click_add_contact()
        view.reject_add_contact({"full_name": "", "email": "x@y.z"}, ["Full name is required"])
        assert view.form_values["email"] == "x@y.z"
        view.click_cancel_add_contact()
        assert view.form_hidden and not view.contacts_hidden
        assert view.form_values == {}
        assert view.form_errors == []

    def test_submit_invokes_handler_and_resets_form_later(self):
        view = JinjaView(form_reset_delay=0.05)
        submitted = []
        view.bind_add_contact_submit(lambda form: submitted.append(dict(form)) or "ok")

        assert view.submit_add_contact({"full_name": "Gonzo"}) == "ok"
        assert submitted == [{"full_name": "Gonzo"}]
        assert view.form_values == {"full_name": "Gonzo"}
        time.sleep(0.2)
        assert view.form_values == {}

    def test_unbound_event_is_ignored(self):
        assert JinjaView().input_search("kermit") is None
