import asyncio

import pandas as pd
import streamlit as st

from use_cases.gate_models import QueryResult
from utils import session_manager

DATADIK_LABELS = {
    "name": "Nama Sekolah",
    "address": "Alamat",
    "kecamatan": "Kecamatan",
    "kabupaten": "Kabupaten",
    "provinsi": "Provinsi",
    "kepalaSekolah": "Kepala Sekolah",
}


def build_school_info_frame(result: QueryResult) -> pd.DataFrame:
    rows = [
        {"Field": label, "Nilai": result.datadik.get(key, "")}
        for key, label in DATADIK_LABELS.items()
        if key in result.datadik
    ]
    school_info = result.hisense.get("schoolInfo") or {}
    if isinstance(school_info, dict):
        rows.extend({"Field": k, "Nilai": v} for k, v in school_info.items())
    return pd.DataFrame(rows, columns=["Field", "Nilai"])


def build_ptk_frame(result: QueryResult) -> pd.DataFrame:
    ptk = result.datadik.get("ptk") or []
    if not isinstance(ptk, list):
        return pd.DataFrame()
    return pd.DataFrame([p for p in ptk if isinstance(p, dict)])


def build_history_frame(result: QueryResult) -> pd.DataFrame:
    history = result.hisense.get("processHistory") or []
    if not isinstance(history, list):
        return pd.DataFrame()
    return pd.DataFrame(history, columns=["tanggal", "status", "keterangan"])


def render_result(result: QueryResult):
    status_green = result.hisense.get("isGreen")
    if status_green is True:
        st.success("✅ Status Hisense: hijau")
    elif status_green is False:
        st.warning("⚠️ Status Hisense: belum hijau")

    st.subheader("Informasi Sekolah")
    st.dataframe(build_school_info_frame(result), hide_index=True, use_container_width=True)

    ptk_df = build_ptk_frame(result)
    if not ptk_df.empty:
        st.subheader(f"PTK ({len(ptk_df)})")
        st.dataframe(ptk_df, hide_index=True, use_container_width=True)

    history_df = build_history_frame(result)
    if not history_df.empty:
        st.subheader("Riwayat Proses")
        st.dataframe(history_df, hide_index=True, use_container_width=True)

    images = result.hisense.get("images") or {}
    if isinstance(images, dict) and images:
        with st.expander("Foto"):
            for caption, url in images.items():
                st.image(url, caption=caption)

    with st.expander("Data mentah (JSON)"):
        st.json(result.payload)


def render_lookup():
    context = session_manager.get_app_context()

    with st.form("lookup_form"):
        query_key = st.text_input("NPSN", value=context.query_key, max_chars=16)
        submitted = st.form_submit_button("Cari")

    if submitted:
        context.set_query_key(query_key)
        with st.spinner("Mengambil data..."):
            asyncio.run(context.submit())
        if context.show_gate:
            # Gate-forcing failures are handled by the cookie prompt, not inline.
            st.rerun()

    cause = context.error_cause
    if cause is not None and not cause.forces_gate:
        st.error(cause.message)

    if context.result is not None:
        render_result(context.result)
