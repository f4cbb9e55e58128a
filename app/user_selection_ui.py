"""
user_selection_ui.py — Choose How to Continue
----------------------------------------------

Four entry points:
- Community Member: sign in, then report sightings under an account
- Anonymous Member: report straight away without an account
- Ranger: sign in to review reports
- Admin: sign in to the analytics dashboard
"""

import streamlit as st

from tools.ui_tools import bilingual

USER_TYPES = [
    {
        "id": "community",
        "title": "Community Member",
        "swahili": "Mwanajamii",
        "icon": "👥",
        "description": "Report wildlife sightings and contribute to conservation",
        "description_sw": "Ripoti kuona wanyamapori na changia uhifadhi",
    },
    {
        "id": "anonymous",
        "title": "Anonymous Member",
        "swahili": "Mwanachama Asiyejulikana",
        "icon": "🕶️",
        "description": "Report wildlife without creating an account",
        "description_sw": "Ripoti wanyamapori bila kuunda akaunti",
    },
    {
        "id": "ranger",
        "title": "Ranger",
        "swahili": "Mlinzi",
        "icon": "🛡️",
        "description": "Review and manage wildlife reports",
        "description_sw": "Kagua na simamia ripoti za wanyamapori",
    },
    {
        "id": "admin",
        "title": "Admin",
        "swahili": "Msimamizi",
        "icon": "⚙️",
        "description": "Full system access and analytics dashboard",
        "description_sw": "Ufikiaji kamili wa mfumo na dashibodi ya takwimu",
    },
]


def render(flow):
    st.title("🐾 Sentry Jamii")
    st.write(bilingual("Choose how you would like to continue", "Chagua jinsi ungependa kuendelea"))

    columns = st.columns(2)
    for i, user_type in enumerate(USER_TYPES):
        with columns[i % 2]:
            with st.container(border=True):
                st.subheader(f"{user_type['icon']} {user_type['title']}")
                st.caption(user_type["swahili"])
                st.write(user_type["description"])
                st.caption(user_type["description_sw"])
                if st.button("Continue", key=f"select_{user_type['id']}", use_container_width=True):
                    flow.select_user_type(user_type["id"])
                    st.rerun()
