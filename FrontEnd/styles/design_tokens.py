# Design tokens for the Focus Timer UI

COLORS = {
    'background': '#F7F9FC',
    'study_bg': '#E7F0FF',
    'break_bg': '#E8F5E9',
    'text': '#3C4450',
    'text_strong': '#133A62',
    'danger': '#D9534F',
    'footer_bg': '#E7F0FF',
    'footer_text': '#133A62',
    'chart_bar': '#4CAF50',
    'chart_grid': '#C9D8E2',
}

FONTS = {
    'family': 'Inter, Manrope, Arial, sans-serif',
    'timer_size': 72,
    'status_size': 20,
    'button_size': 16,
}
