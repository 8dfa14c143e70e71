"""简体中文翻译表。"""

STRINGS: dict[str, str] = {
    # ── 异常 ──
    "exc.player_not_found": "玩家 {player} 没有进行中的对局",
    "exc.invalid_index": "手牌序号 {index} 越界（手牌共 {size} 张）",
    "exc.card_not_found": "未知卡牌: {card}",
    "exc.insufficient_resources": "{resource} 不足: 需要 {required}，当前 {available}",
    "exc.configuration_error": "配置无效",
    "exc.data_load_error": "卡牌数据加载失败",

    # ── 引擎 ──
    "engine.player_initialized": "{player} 开始新对局，牌组共 {count} 张",
    "engine.player_removed": "{player} 结束对局",
    "engine.shuffled": "{player} 将 {count} 张牌洗入牌组",
    "engine.reshuffled": "{player} 牌组耗尽，将弃牌堆洗回牌组",
    "engine.drawn": "{player} 摸了 {count} 张牌",
    "engine.draw_exhausted": "{player} 已无牌可摸（放弃 {missing} 次摸牌）",
    "engine.negative_draw": "{player} 请求摸 {amount} 张牌，未摸牌",
    "engine.card_played": "{player} 打出【{card}】",
    "engine.cohesion": "【{card}】与【{tag}】形成连贯",
    "engine.card_acquired": "{player} 花费 {cost} 点灵感获得【{card}】",
    "engine.card_gained": "{player} 获得【{card}】",
    "engine.turn_reset": "{player} 重置回合资源",

    # ── 资源 ──
    "resource.inspiration": "灵感",
    "resource.ink": "墨水",
    "resource.grit": "毅力",
    "resource.hype": "热度",

    # ── 卡牌类型 ──
    "card_type.skill": "技巧",
    "card_type.flaw": "缺陷",
    "card_type.idea": "灵思",

    # ── 卡牌 ──
    "card.spark": "火花",
    "card.rough_draft": "草稿",
    "card.self_doubt": "自我怀疑",
    "card.writers_block": "写作瓶颈",
    "card.character_sketch": "人物速写",
    "card.dialogue": "对白",
    "card.plot_twist": "情节反转",
    "card.ensemble_cast": "群像",
    "card.world_building": "世界观构建",
    "card.revision": "修订",
    "card.deadline": "截稿日",

    # ── 演示 ──
    "ui.hand_title": "{player} 的手牌",
    "ui.resources_title": "资源",
    "ui.log_title": "对局日志",
    "ui.empty_hand": "（无手牌）",
    "ui.col_index": "#",
    "ui.col_name": "卡牌",
    "ui.col_type": "类型",
    "ui.col_tags": "标签",
    "ui.col_cost": "费用",
    "ui.col_cohesion": "连贯",
    "ui.col_resource": "资源",
    "ui.col_amount": "数值",
}
