"""Services operating on an EditorState: frame serialization and playback"""
